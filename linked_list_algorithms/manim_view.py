from manim import *

from .config import VISUALIZER_CONFIG, pointer_color
from .profiling_helpers import tplay_csv
from .steps import pointer_label, pointers_at_end

MARGIN = 1.0


def flash(mobj, color=ORANGE, scale_factor=1.02, run_time=0.4):
    return Indicate(
        mobj,
        color=color,
        rate_func=there_and_back,
        scale_factor=scale_factor,
        run_time=run_time,
    )


def fit_width(mobj, limit=None):
    limit = limit or config.frame_width - MARGIN
    if mobj.width > limit:
        mobj.scale_to_fit_width(limit)
    return mobj


# -----------------------------
# Lightweight node + pointer views
# -----------------------------
class NodeView(VGroup):
    def __init__(self, value, **kwargs):
        super().__init__(**kwargs)
        box = RoundedRectangle(corner_radius=0.15, height=0.7, width=1.0).set_stroke(WHITE, 2)
        label = Text(str(value)).scale(0.6).move_to(box.get_center())
        fit_width(label, 0.85)
        self.box, self.label = box, label
        self.add(box, label)


class Pointer(VGroup):
    """Pointer tag + dot, with a small label cache ("prev" vs "prev=None")."""
    def __init__(self, name, color, y_offset=0.0):
        super().__init__()
        self.name, self.color, self.y_offset = name, color, y_offset
        self.tag = Text(name).scale(0.5).set_color(color)
        self.dot = Dot(color=color)
        self._label_cache = {name: self.tag.copy()}
        self.add(self.tag, self.dot)

    def _get_or_make_label(self, label_text):
        if label_text not in self._label_cache:
            self._label_cache[label_text] = Text(label_text).scale(0.5).set_color(self.color)
        return self._label_cache[label_text]

    def place_instant(self, ref_mobj, label_text, base_buff=0.45):
        self.tag.become(self._get_or_make_label(label_text))
        self.tag.next_to(ref_mobj, DOWN, buff=base_buff)
        self.tag.shift(DOWN * self.y_offset)
        self.dot.move_to(self.tag.get_bottom() + DOWN * 0.12)

    def move_under_animations(self, ref_mobj, label_text, base_buff=0.45):
        target = self._get_or_make_label(label_text).copy()
        target.next_to(ref_mobj, DOWN, buff=base_buff)
        target.shift(DOWN * self.y_offset)
        return [
            Transform(self.tag, target),
            self.dot.animate.move_to(target.get_bottom() + DOWN * 0.12),
        ]


class ListRow(VGroup):
    """Node boxes in step order, next-arrows, and the None terminus."""
    def __init__(self, nodes, gap=1.0, **kwargs):
        super().__init__(**kwargs)
        self.ids = tuple(n.id for n in nodes)
        self.node_views = VGroup(*[NodeView(n.value) for n in nodes])
        self.none_marker = Text("None").scale(0.5)
        if len(nodes):
            self.node_views.arrange(RIGHT, buff=gap)
            self.none_marker.next_to(self.node_views[-1], RIGHT, buff=gap * 0.6)
        arrows = VGroup()
        targets = list(self.node_views) + [self.none_marker]
        for i, view in enumerate(self.node_views):
            arrows.add(Arrow(view.box.get_right(), targets[i + 1].get_left(), buff=0.08,
                             stroke_width=4, max_tip_length_to_length_ratio=0.2))
        self.arrows = arrows
        self.add(self.node_views, self.none_marker, arrows)


POINTER_ROW_GAP = 0.45


def pointer_offset(rows, name):
    """Vertical offset for a pointer tag. A name keeps its row for the whole scene."""
    if name not in rows:
        rows[name] = len(rows)
    return POINTER_ROW_GAP * rows[name]


# -----------------------------
# Scene
# -----------------------------
class StepSequenceScene(Scene):
    steps = ()
    title = ""
    gap = 1.0
    y_nodes = 1.2
    pause = 0.6

    def __init__(self, steps=None, title=None, **kwargs):
        super().__init__(**kwargs)
        if steps is not None:
            self.steps = list(steps)
        if title is not None:
            self.title = title

    def _row(self, step):
        row = ListRow(step.nodes, gap=self.gap)
        fit_width(row)
        row.move_to(UP * self.y_nodes)
        return row

    def _caption(self, i, step):
        cap = Text(f"{i + 1}/{len(self.steps)}  {step.message}").scale(0.4).to_edge(DOWN)
        return fit_width(cap)

    def _marker_anims(self, row, step):
        anims = []
        for j, view in enumerate(row.node_views):
            if step.deleted_index == j:
                color, width = VISUALIZER_CONFIG["deleted_color"], 5
            elif step.highlighted_index == j:
                color, width = VISUALIZER_CONFIG["highlight_color"], 5
            else:
                color, width = WHITE, 2
            anims.append(view.box.animate.set_stroke(color, width))
        return anims

    def construct(self):
        if not self.steps:
            return
        if self.title:
            self.add(Text(self.title).scale(0.6).to_edge(UP))

        caption = self._caption(0, self.steps[0])
        row = self._row(self.steps[0])
        tplay_csv(self, FadeIn(row, shift=DOWN), FadeIn(caption), run_time=0.8)

        pointers = {}
        rows = {}  # pointer name -> tag row, never reused
        for i, step in enumerate(self.steps):
            if i:
                tplay_csv(self, Transform(caption, self._caption(i, step)), run_time=0.3)

            # node order / length changed (final reversed view, removal)
            if tuple(n.id for n in step.nodes) != row.ids:
                new_row = self._row(step)
                gone = [FadeOut(p) for p in pointers.values()]
                tplay_csv(self, FadeOut(row), *gone, FadeIn(new_row), run_time=0.6)
                pointers.clear()
                row = new_row

            anims = self._marker_anims(row, step)
            for name, idx in step.pointers.items():
                target = row.none_marker if idx is None else row.node_views[idx]
                label = pointer_label(name, idx)
                if name not in pointers:
                    ptr = Pointer(name, pointer_color(name), y_offset=pointer_offset(rows, name))
                    ptr.place_instant(target, label)
                    pointers[name] = ptr
                    anims.append(FadeIn(ptr))
                else:
                    anims.extend(pointers[name].move_under_animations(target, label))
            for name in [n for n in pointers if n not in step.pointers]:
                anims.append(FadeOut(pointers.pop(name)))
            if anims:
                tplay_csv(self, *anims, run_time=0.6)

            if pointers_at_end(step.pointers):
                tplay_csv(self, flash(row.none_marker, color=YELLOW))
            self.wait(self.pause)

        self.wait(self.pause * 2)


def render_steps(steps, title="", quality=None):
    """Render a step sequence to a video file, return the movie path."""
    with tempconfig({
        "quality": quality or VISUALIZER_CONFIG["manim_quality"],
        "disable_caching": True,
    }):
        scene = StepSequenceScene(steps=steps, title=title)
        scene.render()
        return scene.renderer.file_writer.movie_file_path
