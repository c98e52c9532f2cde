# Middle node with slow/fast pointers: fast moves two nodes per slow's one.
# For even lengths slow stops on the first of the two centre nodes,
# i.e. index (L - 1) // 2.

import logging

from ..steps import VisualizationStep, take_snapshot

log = logging.getLogger(__name__)


def find_middle_steps(initial_nodes):
    nodes = take_snapshot(initial_nodes)
    length = len(nodes)
    log.debug("find middle: %d nodes", length)

    if length == 0:
        yield VisualizationStep(nodes, {}, "List is empty, no middle node.")
        return
    if length <= 2:
        yield VisualizationStep(
            nodes,
            {"slow": 0},
            f"The list has {length} node(s). The first node is the middle.",
            highlighted_index=0,
        )
        return

    slow = fast = 0
    yield VisualizationStep(
        nodes,
        {"slow": slow, "fast": fast},
        "Start: Initialize `slow` and `fast` pointers at the head (index 0).",
    )

    while fast + 1 < length and fast + 2 < length:
        slow += 1
        yield VisualizationStep(nodes, {"slow": slow, "fast": fast}, "`slow` pointer moves one step.")
        fast += 2
        yield VisualizationStep(nodes, {"slow": slow, "fast": fast}, "`fast` pointer moves two steps.")

    # even length: fast still has one node to go
    if fast + 1 < length:
        fast += 1
        yield VisualizationStep(
            nodes,
            {"slow": slow, "fast": fast},
            "`fast` pointer moves one final step to the end of the list.",
        )

    yield VisualizationStep(
        nodes,
        {"slow": slow},
        f"Finished. 'fast' pointer reached the end. The middle node is at index {slow}, "
        f'with value "{nodes[slow].value}".',
        highlighted_index=slow,
    )
