from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path, Response, status
from fastapi.responses import HTMLResponse

from ..models import summarize
from ..repositories import TaskRepository, get_repository
from ..rendering import render_page, render_summary, render_task
from ..schemas import HealthOut, TaskCreate

logger = logging.getLogger(__name__)

# Response header htmx turns into a client-side event; elements declaring
# hx-trigger="changedTodos from:body" re-fetch themselves when it is present.
CHANGE_SIGNAL_HEADER = "HX-Trigger"
CHANGE_SIGNAL = "changedTodos"

router = APIRouter(tags=["tasks"])


def _get_repo(repo: TaskRepository = Depends(get_repository)) -> TaskRepository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


def _changed(body: str) -> HTMLResponse:
    return HTMLResponse(content=body, headers={CHANGE_SIGNAL_HEADER: CHANGE_SIGNAL})


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Task list page",
    description="Render the full page with the creation form, the summary and all tasks.",
)
def index(repo: TaskRepository = Depends(_get_repo)) -> HTMLResponse:
    """
    Render the full page.
    """
    # List and counts come from the same snapshot
    tasks = repo.snapshot()
    summary = summarize(tasks)
    return HTMLResponse(content=render_page(tasks, summary.completed, summary.total))


# PUBLIC_INTERFACE
@router.post(
    "/add",
    response_class=HTMLResponse,
    summary="Create task",
    description="Create a task from the 'prompt' form field and return its list item fragment.",
    responses={
        200: {"description": "Task created; response carries the change signal"},
        422: {"description": "Missing 'prompt' form field"},
        500: {"description": "Task store lock could not be acquired"},
    },
)
def add_task(
    payload: Annotated[TaskCreate, Form()],
    repo: TaskRepository = Depends(_get_repo),
) -> HTMLResponse:
    """
    Create a new task and signal that the list changed.
    """
    task = repo.create(payload.prompt)
    logger.info("Created task %d", task["id"])
    return _changed(render_task(task))


# PUBLIC_INTERFACE
@router.post(
    "/{task_id}/done",
    response_class=HTMLResponse,
    summary="Toggle task",
    description="Flip the done flag of a task and return its updated list item fragment.",
    responses={
        200: {"description": "Task toggled; response carries the change signal"},
        204: {"description": "No task with this id; nothing changed"},
        422: {"description": "Task id is not a non-negative integer"},
        500: {"description": "Task store lock could not be acquired"},
    },
)
def toggle_task(
    task_id: str = Path(..., pattern=r"^[0-9]+$", description="Identifier of the task to toggle (digits only)"),
    repo: TaskRepository = Depends(_get_repo),
) -> Response:
    """
    Toggle a task. Unknown ids are a no-op answered with 204 and no change signal.
    """
    task = repo.toggle(int(task_id))
    if task is None:
        logger.debug("Toggle of unknown task %s ignored", task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    logger.info("Toggled task %d (done=%s)", task["id"], task["done"])
    return _changed(render_task(task))


# PUBLIC_INTERFACE
@router.get(
    "/statistic",
    response_class=HTMLResponse,
    summary="Summary fragment",
    description="Render the 'Completed X of Y todos' fragment.",
)
def statistic(repo: TaskRepository = Depends(_get_repo)) -> HTMLResponse:
    """
    Render the summary fragment.
    """
    summary = repo.summary()
    return HTMLResponse(content=render_summary(summary.completed, summary.total))


# PUBLIC_INTERFACE
@router.get("/health", response_model=HealthOut, summary="Health Check", tags=["health"])
def health_check(repo: TaskRepository = Depends(_get_repo)) -> HealthOut:
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of stored tasks.
    """
    return HealthOut(message="Healthy", tasks=repo.summary().total)
