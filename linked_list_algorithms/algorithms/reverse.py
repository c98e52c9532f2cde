# Linked-list reversal as replayable steps.
# Iterative reverse using prev/current/next: each loop iteration becomes four
# steps (save next, reverse link, advance prev, advance current). Links are
# not rewired per step; the reversed order is shown once, in the last step.

import logging

from ..steps import END, VisualizationStep, format_index, take_snapshot

log = logging.getLogger(__name__)


def reverse_list_steps(initial_nodes):
    """
    Yield the steps of an in-place reversal of `initial_nodes`.
    Node order stays as in the snapshot (stable layout) until the final step.
    """
    nodes = take_snapshot(initial_nodes)
    length = len(nodes)
    log.debug("reverse: %d nodes", length)

    if length <= 1:
        yield VisualizationStep(nodes, {}, "List has 0 or 1 node. Nothing to reverse.")
        return

    prev, current = END, 0

    # Initial frame, before any change
    yield VisualizationStep(
        nodes,
        {"prev": prev, "current": current},
        "Start reversal. `prev` is null, `current` is at HEAD (index 0).",
    )

    while current is not END:
        nxt = current + 1 if current < length - 1 else END

        # 1) save forward
        yield VisualizationStep(
            nodes,
            {"prev": prev, "current": current, "next": nxt},
            f"Store the next node (at index {format_index(nxt)}) before we change the link.",
        )

        # 2) reverse current arrow
        yield VisualizationStep(
            nodes,
            {"prev": prev, "current": current, "next": nxt},
            f"Reverse the pointer. Node {nodes[current].value}'s 'next' now points to "
            f"where 'prev' is (index {format_index(prev)}).",
        )

        # 3) advance prev
        prev = current
        yield VisualizationStep(
            nodes,
            {"prev": prev, "current": current, "next": nxt},
            f"Move 'prev' up to 'current'. Both now point to index {current}.",
        )

        # 4) advance current
        current = nxt
        yield VisualizationStep(
            nodes,
            {"prev": prev, "current": current, "next": nxt},
            f"Move 'current' up to 'next'. 'current' now points to index {format_index(current)}.",
        )

    yield VisualizationStep(
        nodes,
        {"prev": prev, "current": END},
        "'current' is now null. The loop terminates. 'prev' points to the new HEAD.",
    )

    yield VisualizationStep(
        nodes[::-1],
        {},
        "Reversal complete! The list order is now updated.",
    )
