# Plain-text rendering of a step, used by the CLI.
#
#   Step 3/15
#   10 -> 20 -> 30 -> None
#   prev=None, current=0 (10), next=1 (20)
#   > Store the next node (at index 1) before we change the link.

from .steps import END, pointer_label


def format_node(step, index):
    value = step.nodes[index].value
    if step.deleted_index == index:
        return f"~{value}~"
    if step.highlighted_index == index:
        return f"[{value}]"
    return value


def format_pointers(step):
    parts = []
    for name, index in step.pointers.items():
        if index is END:
            parts.append(pointer_label(name, index))
        else:
            parts.append(f"{name}={index} ({step.nodes[index].value})")
    return ", ".join(parts)


def format_step(step, index=None, total=None):
    lines = []
    if index is not None:
        lines.append(f"Step {index + 1}/{total}" if total else f"Step {index + 1}")
    chain = [format_node(step, i) for i in range(len(step.nodes))]
    lines.append(" -> ".join(chain + ["None"]))
    pointers = format_pointers(step)
    if pointers:
        lines.append(pointers)
    lines.append(f"> {step.message}")
    return "\n".join(lines)


def format_steps(steps):
    total = len(steps)
    return "\n\n".join(format_step(s, i, total) for i, s in enumerate(steps))
