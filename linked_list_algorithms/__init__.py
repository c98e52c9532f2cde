from .algorithms import (
    ALGORITHMS,
    FIND_MIDDLE,
    REMOVE_NTH_FROM_END,
    REVERSE_LIST,
    find_middle_steps,
    remove_nth_from_end_steps,
    reverse_list_steps,
    run_algorithm,
)
from .linked_list import LinkedList
from .session import VisualizerSession
from .steps import END, Node, VisualizationStep, pointers_at, pointers_at_end, take_snapshot

__version__ = "0.1.0"
