"""
Live-edit / algorithm-replay state machine.

In live mode the user edits the list directly; each operation sets a
message and a status ("success" / "error") for the message log. Starting
an algorithm snapshots the list, materializes the whole step sequence and
switches to replay mode, where next / prev / go_to_step move through it.
Leaving replay mode commits the last step's nodes for mutating algorithms.

Bad user input never raises: it is reported through `message` with
status "error" and the operation returns False.
"""

import logging

from .algorithms import ALGORITHMS, REMOVE_NTH_FROM_END, REVERSE_LIST, run_algorithm
from .linked_list import LinkedList

log = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"


def _parse_int(text):
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except ValueError:
        return None


class VisualizerSession:
    def __init__(self, values=()):
        self.list = LinkedList(values)
        self.message = "Welcome! Add a node to start."
        self.status = None
        self.highlighted_index = None
        self.operation = None  # (kind, index) of the last edit, for the view

        # algorithm mode
        self.algorithm = None
        self.steps = []
        self.step_index = 0

    # --- status helpers ---

    def _ok(self, msg, operation=None, highlighted_index=None):
        self.message = msg
        self.status = SUCCESS
        self.operation = operation
        self.highlighted_index = highlighted_index
        log.info(msg)
        return True

    def _error(self, msg):
        self.message = msg
        self.status = ERROR
        self.highlighted_index = None
        log.warning(msg)
        return False

    def _editable(self):
        if self.in_algorithm_mode:
            return self._error("Error: Exit algorithm mode before editing the list.")
        return True

    def _clean_value(self, value):
        value = "" if value is None else str(value)
        if not value.strip():
            self._error("Error: Value cannot be empty.")
            return None
        return value

    # --- live editing ---

    @property
    def nodes(self):
        return self.list.snapshot()

    def append(self, value):
        if not self._editable():
            return False
        value = self._clean_value(value)
        if value is None:
            return False
        self.list.append(value)
        return self._ok(f'Appended "{value}" to the list.', ("append", len(self.list) - 1))

    def prepend(self, value):
        if not self._editable():
            return False
        value = self._clean_value(value)
        if value is None:
            return False
        self.list.prepend(value)
        return self._ok(f'Prepended "{value}" to the list.', ("prepend", 0))

    def insert_at(self, value, index):
        if not self._editable():
            return False
        value = self._clean_value(value)
        if value is None:
            return False
        index = _parse_int(index)
        if index is None or index < 0 or index > len(self.list):
            return self._error(f"Error: Index must be between 0 and {len(self.list)}.")
        self.list.insert_at(index, value)
        return self._ok(f'Inserted "{value}" at index {index}.', ("insert", index))

    def delete(self, value):
        if not self._editable():
            return False
        index = self.list.find_index(value)
        if index == -1:
            return self._error(f'Value "{value}" not found.')
        self.list.delete(value)
        return self._ok(f'Deleted first occurrence of "{value}".', ("delete", index))

    def delete_at(self, index):
        if not self._editable():
            return False
        index = _parse_int(index)
        if index is None or index < 0 or index >= len(self.list):
            return self._error(f"Error: Index must be between 0 and {len(self.list) - 1}.")
        self.list.delete_at(index)
        return self._ok(f"Deleted node at index {index}.", ("delete", index))

    def find(self, value):
        index = self.list.find_index(value)
        if index == -1:
            return self._error(f'Value "{value}" not found in the list.')
        return self._ok(f'Found "{value}" at index {index}.', highlighted_index=index)

    def reset(self):
        if not self._editable():
            return False
        self.list = LinkedList()
        return self._ok("LinkedList has been reset.")

    # --- algorithm mode ---

    @property
    def in_algorithm_mode(self):
        return self.algorithm is not None

    def start_algorithm(self, name, *params):
        if self.in_algorithm_mode:
            return self._error("Error: An algorithm is already running.")
        if name not in ALGORITHMS:
            return self._error(f"Error: Unknown algorithm {name!r}.")
        nodes = self.list.snapshot()
        if not nodes:
            return self._error("Cannot run algorithm on an empty list.")

        if name == REMOVE_NTH_FROM_END:
            n = _parse_int(params[0]) if params else None
            if n is None or n <= 0:
                return self._error("Please provide a valid positive number for 'n'.")
            params = (n,)

        steps = run_algorithm(name, nodes, *params)
        self.algorithm = name
        self.steps = steps
        self.step_index = 0
        self.status = None
        log.info("started %s: %d steps", name, len(steps))
        return True

    @property
    def current_step(self):
        if not self.in_algorithm_mode:
            return None
        return self.steps[self.step_index]

    @property
    def step_number(self):
        """1-based position shown to the user."""
        return self.step_index + 1

    @property
    def total_steps(self):
        return len(self.steps)

    @property
    def is_first_step(self):
        return self.step_index == 0

    @property
    def is_last_step(self):
        return self.step_index == len(self.steps) - 1

    def next_step(self):
        if self.in_algorithm_mode:
            self.step_index = min(self.step_index + 1, len(self.steps) - 1)
        return self.current_step

    def prev_step(self):
        if self.in_algorithm_mode:
            self.step_index = max(self.step_index - 1, 0)
        return self.current_step

    def go_to_step(self, number):
        """Jump to a 1-based step number; out-of-range targets are ignored."""
        index = _parse_int(number)
        if self.in_algorithm_mode and index is not None and 1 <= index <= len(self.steps):
            self.step_index = index - 1
        return self.current_step

    def exit_algorithm_mode(self):
        if not self.in_algorithm_mode:
            return False
        algo = ALGORITHMS[self.algorithm]
        # a single step means nothing changed (bad n, or too short to reverse)
        if algo.mutating and len(self.steps) > 1:
            self.list = LinkedList.from_nodes(self.steps[-1].nodes)
            if self.algorithm == REVERSE_LIST:
                msg = "List is now reversed."
            elif self.algorithm == REMOVE_NTH_FROM_END:
                msg = "Node removed from list."
            else:
                msg = "Algorithm finished."
        else:
            msg = "Exited algorithm mode."

        self.algorithm = None
        self.steps = []
        self.step_index = 0
        return self._ok(msg)

    # --- what the view shows right now ---

    @property
    def current_nodes(self):
        step = self.current_step
        return list(step.nodes) if step is not None else self.nodes

    @property
    def current_message(self):
        step = self.current_step
        return step.message if step is not None else self.message

    @property
    def current_pointers(self):
        step = self.current_step
        return dict(step.pointers) if step is not None else {}
