"""
HTML fragment rendering for the task list.

Every function here is a pure mapping from data to markup. The same input always
produces the same string, and element ids are derived only from the task id, so a
fragment returned after a mutation can replace the one already in the page.
"""
from __future__ import annotations

from typing import Iterable

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .models import Task

_env = Environment(
    loader=PackageLoader("htmx_todos", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context: object) -> str:
    return _env.get_template(template_name).render(**context)


# PUBLIC_INTERFACE
def render_task(task: Task) -> str:
    """
    Render one task as a list item.

    The item has id ``todo-{id}``. Its label is struck through when the task is
    done. The checkbox posts to ``/{id}/done`` and swaps the response in place of
    this same item.
    """
    return _render("task.html", task=task)


# PUBLIC_INTERFACE
def render_task_list(tasks: Iterable[Task]) -> str:
    """Concatenate the fragments of all tasks in order."""
    return "".join(render_task(task) for task in tasks)


# PUBLIC_INTERFACE
def render_summary(completed: int, total: int) -> str:
    """Render the 'Completed X of Y todos' fragment."""
    return _render("summary.html", completed=completed, total=total)


# PUBLIC_INTERFACE
def render_page(tasks: Iterable[Task], completed: int, total: int) -> str:
    """
    Render the full document: asset links, the creation form, the summary element
    that refreshes itself on the ``changedTodos`` event, and the task list.
    """
    return _render(
        "page.html",
        summary=Markup(render_summary(completed, total)),
        task_list=Markup(render_task_list(tasks)),
    )


# PUBLIC_INTERFACE
def render_error(message: str) -> str:
    """Render an error banner used as the body of internal-error responses."""
    return _render("error.html", message=message)
