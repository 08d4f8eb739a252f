"""Pure response formatting - no I/O dependencies."""

from collections.abc import Sequence

from .tasks import Task, display_string

INDENT = "  "


def greeting() -> str:
    return "Hello! I'm Weeny.\nWhat can I do for you?"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def error(message: str) -> str:
    return f"OOPS!!! {message}"


def save_warning(message: str) -> str:
    return f"Warning: could not save your tasks ({message}). Changes are kept for this session."


def format_numbered(tasks: Sequence[Task]) -> str:
    """
    Number tasks from 1 in display order.

    Pure function - no I/O.
    """
    return "\n".join(f"{i}. {display_string(t)}" for i, t in enumerate(tasks, start=1))


def task_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "Your task list is empty."
    return f"Here are the tasks in your list:\n{format_numbered(tasks)}"


def search_results(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No matching tasks found."
    return f"Here are the matching tasks in your list:\n{format_numbered(tasks)}"


def marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n{INDENT}{display_string(task)}"


def unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n{INDENT}{display_string(task)}"


def added(task: Task, size: int) -> str:
    return (
        f"Got it. I've added this task:\n{INDENT}{display_string(task)}\n"
        f"{_count_line(size)}"
    )


def deleted(task: Task, size: int) -> str:
    return (
        f"Noted. I've removed this task:\n{INDENT}{display_string(task)}\n"
        f"{_count_line(size)}"
    )


def _count_line(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."
