import logging
from collections import namedtuple

from .find_middle import find_middle_steps
from .remove_nth_from_end import remove_nth_from_end_steps
from .reverse import reverse_list_steps

log = logging.getLogger(__name__)

# mutating: the last step's nodes replace the live list on exit
Algorithm = namedtuple("Algorithm", ["name", "generator", "mutating", "params"])

REVERSE_LIST = "Reverse List"
FIND_MIDDLE = "Find Middle Node"
REMOVE_NTH_FROM_END = "Remove Nth From End"

ALGORITHMS = {
    REVERSE_LIST: Algorithm(REVERSE_LIST, reverse_list_steps, True, ()),
    FIND_MIDDLE: Algorithm(FIND_MIDDLE, find_middle_steps, False, ()),
    REMOVE_NTH_FROM_END: Algorithm(REMOVE_NTH_FROM_END, remove_nth_from_end_steps, True, ("n",)),
}


def run_algorithm(name, nodes, *params):
    """Run one algorithm to completion and return its steps as a list."""
    try:
        algo = ALGORITHMS[name]
    except KeyError:
        log.error("unknown algorithm %r", name)
        raise
    steps = list(algo.generator(nodes, *params))
    log.debug("%s produced %d steps", name, len(steps))
    return steps


__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "FIND_MIDDLE",
    "REMOVE_NTH_FROM_END",
    "REVERSE_LIST",
    "find_middle_steps",
    "remove_nth_from_end_steps",
    "reverse_list_steps",
    "run_algorithm",
]
