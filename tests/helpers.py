from linked_list_algorithms.steps import END, take_snapshot


def snapshot(*values):
    return take_snapshot(str(v) for v in values)


def assert_valid_indices(steps):
    for step in steps:
        size = len(step.nodes)
        for name, index in step.pointers.items():
            assert index is END or 0 <= index < size, (name, index, step.message)
        for marker in (step.highlighted_index, step.deleted_index):
            assert marker is None or 0 <= marker < size


def values(step):
    return [n.value for n in step.nodes]
