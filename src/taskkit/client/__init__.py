"""Client tier - HTTP task service and the views bound to it."""

from .app import ClientApp
from .service import TaskService, TaskServiceError
from .views import (
    Alerts,
    Navigator,
    TaskDetails,
    TaskDetailsState,
    TaskEdit,
    TaskFormState,
    TaskList,
    TaskListState,
    TaskNew,
    form_loaded,
    render_task_details,
    render_task_edit,
    render_task_list,
    render_task_new,
    task_loaded,
    tasks_loaded,
    with_description,
    with_done,
    with_title,
)

__all__ = [
    "ClientApp",
    "TaskService",
    "TaskServiceError",
    "Alerts",
    "Navigator",
    "TaskList",
    "TaskDetails",
    "TaskEdit",
    "TaskNew",
    "TaskListState",
    "TaskDetailsState",
    "TaskFormState",
    "tasks_loaded",
    "task_loaded",
    "form_loaded",
    "with_title",
    "with_description",
    "with_done",
    "render_task_list",
    "render_task_details",
    "render_task_edit",
    "render_task_new",
]
