# Step-by-step animation of a step sequence (Matplotlib).
# Each frame draws the step's nodes left to right, the next-arrows, a "None"
# terminus on the right, and the pointer labels under the node they sit on.

import logging

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.patches import Rectangle

from .config import VISUALIZER_CONFIG, pointer_color
from .steps import pointer_label, pointers_at, pointers_at_end

log = logging.getLogger(__name__)

LABEL_GAP = 0.35


# --- Drawing helpers ---
def _node_face(step, i):
    if step.deleted_index == i:
        return VISUALIZER_CONFIG["deleted_color"]
    if step.highlighted_index == i:
        return VISUALIZER_CONFIG["highlight_color"]
    return "none"


def _stack_labels(ax, x, names, labels):
    # one line per pointer so each keeps its colour
    for k, (name, label) in enumerate(zip(names, labels)):
        ax.text(x, 0.0 - k * LABEL_GAP, label, ha='center', va='center', color=pointer_color(name))


def draw_step(ax, step, title=None):
    ax.clear()
    n = len(step.nodes)
    ax.set_xlim(-1, n + 2)
    ax.set_ylim(-1.5, 2.5)
    ax.axis('off')

    # positions along x-axis
    xs = np.arange(n, dtype=float)
    y = 1.0
    none_x = n + 0.5

    for i, node in enumerate(step.nodes):
        ax.add_patch(Rectangle((xs[i] - 0.4, y - 0.3), 0.8, 0.6,
                               facecolor=_node_face(step, i),
                               edgecolor=VISUALIZER_CONFIG["node_color"]))
        ax.text(xs[i], y, node.value, ha='center', va='center')

    ax.text(none_x, y, "None", ha='center', va='center')

    # next arrows in list order; the tail points at None
    for i in range(n):
        end_x = xs[i + 1] - 0.4 if i < n - 1 else none_x - 0.2
        ax.annotate("",
                    xy=(end_x, y), xycoords='data',
                    xytext=(xs[i] + 0.4, y), textcoords='data',
                    arrowprops=dict(arrowstyle="->"))

    for i in range(n):
        names = pointers_at(step.pointers, i)
        _stack_labels(ax, xs[i], names, names)
    at_end = pointers_at_end(step.pointers)
    _stack_labels(ax, none_x, at_end, [pointer_label(name, None) for name in at_end])

    ax.set_title(title if title is not None else step.message, fontsize=9, wrap=True)


def animate_steps(steps, fig=None, interval=None, title=None):
    """Return (fig, FuncAnimation) cycling through `steps` once."""
    if fig is None:
        fig = plt.figure(figsize=VISUALIZER_CONFIG["figure_size"])
    ax = fig.gca()
    total = len(steps)

    def update(i):
        msg = f"{i + 1}/{total}: {steps[i].message}"
        draw_step(ax, steps[i], title=f"{title}\n{msg}" if title else msg)
        return []

    anim = FuncAnimation(fig, update, init_func=lambda: update(0), frames=total,
                         interval=interval or VISUALIZER_CONFIG["interval_ms"],
                         blit=False, repeat=False)
    return fig, anim


def save_animation(steps, path, fps=None, title=None):
    fps = fps or max(1, round(1000 / VISUALIZER_CONFIG["interval_ms"]))
    fig, anim = animate_steps(steps, title=title)
    anim.save(path, writer=PillowWriter(fps=fps))
    plt.close(fig)
    log.info("saved %d frames to %s", len(steps), path)
    return path


def show_steps(steps, title=None):
    fig, anim = animate_steps(steps, title=title)
    plt.show()
    return anim
