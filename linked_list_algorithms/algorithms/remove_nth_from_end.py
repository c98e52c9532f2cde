# Remove the n-th node from the end with the two-pointer gap technique:
# move `fast` n nodes ahead, then walk both until `fast` is on the tail.
# `slow` then sits just before the node to delete. If the gap already
# pushes `fast` past the end, the head is the target.

import logging
import numbers

from ..steps import END, VisualizationStep, take_snapshot

log = logging.getLogger(__name__)


def remove_nth_from_end_steps(initial_nodes, n):
    nodes = take_snapshot(initial_nodes)
    length = len(nodes)
    log.debug("remove nth from end: %d nodes, n=%r", length, n)

    # Bad n is reported as a single step, not raised
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0 or n > length:
        log.info("remove nth from end: n=%r outside [1, %d]", n, length)
        yield VisualizationStep(
            nodes,
            {},
            f"Error: 'n' must be a number between 1 and the list length ({length}), "
            f"i.e. in the range [1, {length}].",
        )
        return
    n = int(n)

    def at(i):
        # fast may step off the tail; show it on the null terminus
        return i if i < length else END

    slow = fast = 0
    yield VisualizationStep(
        nodes,
        {"slow": slow, "fast": fast},
        "Start: Initialize `slow` and `fast` pointers at the head (index 0).",
    )

    # Move fast n steps ahead
    yield VisualizationStep(
        nodes,
        {"slow": slow, "fast": fast},
        f"Move 'fast' pointer {n} steps ahead to create a gap.",
    )
    for i in range(n):
        fast += 1
        where = f"index {fast}" if fast < length else "null (past the end)"
        yield VisualizationStep(
            nodes,
            {"slow": slow, "fast": at(fast)},
            f"Moving 'fast'... Step {i + 1} of {n}. 'fast' is now at {where}.",
        )

    if fast == length:
        yield VisualizationStep(
            nodes,
            {"slow": slow},
            "The node to remove is the head (index 0).",
            deleted_index=0,
        )
        yield VisualizationStep(nodes[1:], {}, "Removed the head node. Operation complete.")
        return

    yield VisualizationStep(
        nodes,
        {"slow": slow, "fast": fast},
        "Now, move `slow` and `fast` together until `fast` reaches the end of the list.",
    )
    while fast + 1 < length:
        slow += 1
        fast += 1
        yield VisualizationStep(nodes, {"slow": slow, "fast": fast}, "Moving 'slow' and 'fast' one step.")

    deleted = slow + 1
    yield VisualizationStep(
        nodes,
        {"slow": slow},
        "'fast' has reached the end. 'slow' is now just before the node to be deleted.",
    )
    yield VisualizationStep(
        nodes,
        {"slow": slow},
        f'The node to remove is at index {deleted} (value "{nodes[deleted].value}").',
        deleted_index=deleted,
    )
    yield VisualizationStep(
        nodes[:deleted] + nodes[deleted + 1:],
        {},
        f"Node at index {deleted} removed. Operation complete.",
    )
