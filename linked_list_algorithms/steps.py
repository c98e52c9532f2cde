"""
Step and pointer types shared by the algorithm step generators.

A step is one frozen moment of an algorithm run: the nodes to draw, where
each named pointer sits, a line of narration, and optional highlight /
deletion markers. Generators are the only writers; views and the replay
session only read.

Pointers hold an index into the step's own nodes, or END for the null
terminus of the list (the "None" box on the right of a drawing).
"""

import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

# Past-the-end pointer value, i.e. the null `next` of the tail
END = None

PointerMap = Dict[str, Optional[int]]


@dataclass(frozen=True)
class Node:
    id: str
    value: str


def new_node(value) -> Node:
    value = str(value)
    return Node(id=f"{value}-{uuid.uuid4().hex[:12]}", value=value)


def take_snapshot(source) -> Tuple[Node, ...]:
    """Freeze list contents into a tuple of Nodes.

    Accepts anything with a `snapshot()` method (the LinkedList container),
    or an iterable of Nodes, of {"id", "value"} dicts, or of plain values
    (plain values get fresh ids).
    """
    if hasattr(source, "snapshot"):
        return tuple(source.snapshot())
    nodes = []
    for item in source:
        if isinstance(item, Node):
            nodes.append(item)
        elif isinstance(item, Mapping):
            nodes.append(Node(id=str(item["id"]), value=str(item["value"])))
        else:
            nodes.append(new_node(item))
    return tuple(nodes)


def _check_index(what, index, length):
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"{what} must be an int index, got {index!r}")
    if not 0 <= index < length:
        raise ValueError(f"{what}={index} outside [0, {length - 1}]")


@dataclass(frozen=True)
class VisualizationStep:
    nodes: Tuple[Node, ...]
    pointers: Mapping[str, Optional[int]] = field(default_factory=dict)
    message: str = ""
    highlighted_index: Optional[int] = None
    deleted_index: Optional[int] = None

    def __post_init__(self):
        nodes = tuple(self.nodes)
        pointers = dict(self.pointers)
        for name, index in pointers.items():
            if index is not END:
                _check_index(f"pointer {name!r}", index, len(nodes))
        if self.highlighted_index is not None:
            _check_index("highlighted_index", self.highlighted_index, len(nodes))
        if self.deleted_index is not None:
            _check_index("deleted_index", self.deleted_index, len(nodes))
        # frozen: write through object.__setattr__
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "pointers", MappingProxyType(pointers))

    # explicit: the generated hash would choke on the mapping proxy
    def __hash__(self):
        return hash((self.nodes, tuple(self.pointers.items()), self.message,
                     self.highlighted_index, self.deleted_index))

    @property
    def values(self) -> List[str]:
        return [n.value for n in self.nodes]


# --- Pointer lookup (kept apart from map production) ---

def pointers_at(pointers: Mapping[str, Optional[int]], index: int) -> List[str]:
    """Names of the pointers sitting on `index`, in map order."""
    return [name for name, i in pointers.items() if i is not END and i == index]


def pointers_at_end(pointers: Mapping[str, Optional[int]]) -> List[str]:
    """Names of the pointers sitting on the null terminus."""
    return [name for name, i in pointers.items() if i is END]


def pointer_label(name, index) -> str:
    return f"{name}=None" if index is END else name


def format_index(index) -> str:
    return "null" if index is END else str(index)
