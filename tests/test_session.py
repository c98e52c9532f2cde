from linked_list_algorithms.algorithms import FIND_MIDDLE, REMOVE_NTH_FROM_END, REVERSE_LIST
from linked_list_algorithms.session import ERROR, SUCCESS, VisualizerSession


def make_session():
    return VisualizerSession(["10", "20", "30"])


def test_live_editing_messages():
    s = VisualizerSession()
    assert s.append("10")
    assert s.message == 'Appended "10" to the list.'
    assert s.status == SUCCESS
    assert s.prepend("5")
    assert s.insert_at("7", "1")
    assert [n.value for n in s.nodes] == ["5", "7", "10"]
    assert s.operation == ("insert", 1)


def test_bad_input_is_reported_not_raised():
    s = make_session()
    assert not s.append("   ")
    assert s.status == ERROR
    assert s.message == "Error: Value cannot be empty."
    assert not s.insert_at("x", "9")
    assert s.message == "Error: Index must be between 0 and 3."
    assert not s.delete_at("abc")
    assert s.message == "Error: Index must be between 0 and 2."
    assert not s.delete("99")
    assert not s.find("99")
    assert [n.value for n in s.nodes] == ["10", "20", "30"]


def test_find_and_delete():
    s = make_session()
    assert s.find("20")
    assert s.highlighted_index == 1
    assert s.delete("20")
    assert s.operation == ("delete", 1)
    assert s.delete_at(0)
    assert [n.value for n in s.nodes] == ["30"]
    assert s.reset()
    assert s.nodes == []


def test_algorithm_on_empty_list_rejected():
    s = VisualizerSession()
    assert not s.start_algorithm(REVERSE_LIST)
    assert s.message == "Cannot run algorithm on an empty list."
    assert not s.in_algorithm_mode


def test_remove_nth_needs_positive_n():
    s = make_session()
    assert not s.start_algorithm(REMOVE_NTH_FROM_END)
    assert not s.start_algorithm(REMOVE_NTH_FROM_END, "0")
    assert s.message == "Please provide a valid positive number for 'n'."


def test_navigation_clamps_and_jumps():
    s = make_session()
    assert s.start_algorithm(REVERSE_LIST)
    assert s.total_steps == 15
    assert s.is_first_step
    s.prev_step()
    assert s.step_index == 0
    s.go_to_step(15)
    assert s.is_last_step
    s.next_step()
    assert s.step_index == 14
    s.go_to_step(0)
    s.go_to_step(16)
    assert s.step_number == 15
    s.go_to_step("3")
    assert s.step_index == 2
    assert s.current_message == s.steps[2].message


def test_exit_commits_mutating_algorithms():
    s = make_session()
    s.start_algorithm(REVERSE_LIST)
    assert s.exit_algorithm_mode()
    assert [n.value for n in s.nodes] == ["30", "20", "10"]
    assert s.message == "List is now reversed."

    s.start_algorithm(REMOVE_NTH_FROM_END, 1)
    s.exit_algorithm_mode()
    assert [n.value for n in s.nodes] == ["30", "20"]
    assert s.message == "Node removed from list."


def test_exit_ignores_find_middle_and_error_runs():
    s = make_session()
    before = s.nodes
    s.start_algorithm(FIND_MIDDLE)
    s.go_to_step(s.total_steps)
    assert s.current_step.highlighted_index == 1
    s.exit_algorithm_mode()
    assert s.nodes == before
    assert s.message == "Exited algorithm mode."

    s.start_algorithm(REMOVE_NTH_FROM_END, 5)
    assert s.total_steps == 1
    assert "[1, 3]" in s.current_message
    s.exit_algorithm_mode()
    assert s.nodes == before


def test_editing_blocked_during_replay():
    s = make_session()
    s.start_algorithm(FIND_MIDDLE)
    assert not s.append("40")
    assert s.status == ERROR
    assert not s.start_algorithm(REVERSE_LIST)
    s.exit_algorithm_mode()
    assert s.append("40")


def test_current_view_falls_back_to_live_list():
    s = make_session()
    assert s.current_step is None
    assert s.current_pointers == {}
    assert [n.value for n in s.current_nodes] == ["10", "20", "30"]
    s.start_algorithm(REVERSE_LIST)
    assert s.current_pointers == {"prev": None, "current": 0}
