"""Task views: immutable view-state, pure update and render functions, and the view controllers.

Each view holds a frozen state value. Input handlers replace it with the
result of a pure update function, and ``render()`` only reads it. Service
failures are reported through ``Alerts`` and leave the view usable.
"""

from __future__ import annotations

from html import escape
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from taskkit.core.logging import get_logger
from taskkit.modules.task.schemas import TaskOut

from .service import TaskService, TaskServiceError

logger = get_logger(__name__)


class Navigator(Protocol):
    """Moves the client to another location and loads the view found there."""

    async def navigate(self, path: str) -> None: ...


class Alerts(Protocol):
    """Shows transient notifications."""

    def danger(self, message: str) -> None: ...


def task_path(id: int) -> str:
    return f"/tasks/{id}"


# --------------------------------------------------------------------- View state


class ViewState(BaseModel):
    """Base for immutable view states."""

    model_config = ConfigDict(frozen=True)


class TaskListState(ViewState):
    tasks: tuple[TaskOut, ...] = ()


class TaskDetailsState(ViewState):
    id: int
    task: TaskOut | None = None


class TaskFormState(ViewState):
    """Editable copy of a task's fields bound to the form controls."""

    id: int | None = None
    loaded: bool = False
    title: str = ""
    description: str = ""
    done: bool = False


# --------------------------------------------------------------------- Pure updates


def tasks_loaded(state: TaskListState, tasks: list[TaskOut]) -> TaskListState:
    return state.model_copy(update={"tasks": tuple(tasks)})


def task_loaded(state: TaskDetailsState, task: TaskOut) -> TaskDetailsState:
    return state.model_copy(update={"task": task})


def form_loaded(state: TaskFormState, task: TaskOut) -> TaskFormState:
    """Seed the form with a fetched task."""
    return state.model_copy(
        update={"id": task.id, "loaded": True, "title": task.title, "description": task.description, "done": task.done}
    )


def with_title(state: TaskFormState, title: str) -> TaskFormState:
    return state.model_copy(update={"title": title})


def with_description(state: TaskFormState, description: str) -> TaskFormState:
    return state.model_copy(update={"description": description})


def with_done(state: TaskFormState, done: bool) -> TaskFormState:
    return state.model_copy(update={"done": done})


# --------------------------------------------------------------------- Pure rendering


def _card(title: str, body: str) -> str:
    return f'<div class="card"><h5 class="card-title">{escape(title)}</h5>{body}</div>'


def _row(label: str, value: str) -> str:
    return f'<div class="row"><div class="col-2">{escape(label)}</div><div class="col">{escape(value)}</div></div>'


def _button(action: str, label: str, kind: str = "success") -> str:
    return f'<button type="button" class="btn btn-{kind}" data-action="{action}">{escape(label)}</button>'


def render_task_list(state: TaskListState) -> str:
    links = "".join(
        f'<div class="row"><a href="#{task_path(task.id)}">{escape(task.title)}</a></div>' for task in state.tasks
    )
    return _card("Tasks", links) + _button("new", "New task")


def render_task_details(state: TaskDetailsState) -> str:
    task = state.task
    if task is None:
        return _card("Task", "")
    rows = (
        _row("Title:", task.title)
        + _row("Description:", task.description)
        + _row("Done:", "yes" if task.done else "no")
    )
    return _card("Task", rows) + _button("edit", "Edit")


def _form(state: TaskFormState, *, with_done_control: bool) -> str:
    fields = (
        f'<label>Title<input type="text" name="title" value="{escape(state.title)}"></label>'
        f'<label>Description<textarea name="description">{escape(state.description)}</textarea></label>'
    )
    if with_done_control:
        checked = " checked" if state.done else ""
        fields += f'<label>Done<input type="checkbox" name="done"{checked}></label>'
    return f"<form>{fields}</form>"


def render_task_edit(state: TaskFormState) -> str:
    return (
        _card("Edit task", _form(state, with_done_control=True))
        + _button("save", "Save")
        + _button("delete", "Delete", kind="danger")
    )


def render_task_new(state: TaskFormState) -> str:
    return _card("New task", _form(state, with_done_control=False)) + _button("create", "Create")


def render_menu() -> str:
    return '<nav class="navbar"><a href="#/">Todo App</a><a href="#/tasks">Tasks</a></nav>'


# --------------------------------------------------------------------- Views


class TaskView:
    """Common wiring of a view to the task service and its collaborators."""

    def __init__(self, service: TaskService, navigator: Navigator, alerts: Alerts) -> None:
        self.service = service
        self.navigator = navigator
        self.alerts = alerts

    async def mount(self) -> None:
        """Load the view's data."""

    def render(self) -> str:
        raise NotImplementedError

    def _fail(self, error: TaskServiceError) -> None:
        logger.info("view.error", view=type(self).__name__, status_code=error.status_code, message=error.message)
        self.alerts.danger(error.message)


class TaskList(TaskView):
    """All tasks, each linking to its details."""

    def __init__(self, service: TaskService, navigator: Navigator, alerts: Alerts) -> None:
        super().__init__(service, navigator, alerts)
        self.state = TaskListState()

    async def mount(self) -> None:
        try:
            self.state = tasks_loaded(self.state, await self.service.get_all())
        except TaskServiceError as e:
            self._fail(e)

    async def new_task(self) -> None:
        await self.navigator.navigate("/tasks/new")

    def render(self) -> str:
        return render_task_list(self.state)


class TaskDetails(TaskView):
    """Read-only view of one task."""

    def __init__(self, id: int, service: TaskService, navigator: Navigator, alerts: Alerts) -> None:
        super().__init__(service, navigator, alerts)
        self.state = TaskDetailsState(id=id)

    async def mount(self) -> None:
        try:
            self.state = task_loaded(self.state, await self.service.get(self.state.id))
        except TaskServiceError as e:
            self._fail(e)

    async def edit(self) -> None:
        await self.navigator.navigate(f"{task_path(self.state.id)}/edit")

    def render(self) -> str:
        return render_task_details(self.state)


class TaskEdit(TaskView):
    """Edit form for one task, with save and delete actions."""

    def __init__(self, id: int, service: TaskService, navigator: Navigator, alerts: Alerts) -> None:
        super().__init__(service, navigator, alerts)
        self.id = id
        self.state = TaskFormState(id=id)

    async def mount(self) -> None:
        try:
            self.state = form_loaded(self.state, await self.service.get(self.id))
        except TaskServiceError as e:
            self._fail(e)

    def on_title_change(self, value: str) -> None:
        self.state = with_title(self.state, value)

    def on_description_change(self, value: str) -> None:
        self.state = with_description(self.state, value)

    def on_done_change(self, value: bool) -> None:
        self.state = with_done(self.state, value)

    async def save(self) -> None:
        task = TaskOut(id=self.id, title=self.state.title, description=self.state.description, done=self.state.done)
        try:
            await self.service.update(task)
        except TaskServiceError as e:
            self._fail(e)
            return
        await self.navigator.navigate(task_path(self.id))

    async def delete(self) -> None:
        try:
            await self.service.delete(self.id)
        except TaskServiceError as e:
            self._fail(e)
            return
        await self.navigator.navigate("/tasks")

    def render(self) -> str:
        return render_task_edit(self.state)


class TaskNew(TaskView):
    """Form for creating a task."""

    def __init__(self, service: TaskService, navigator: Navigator, alerts: Alerts) -> None:
        super().__init__(service, navigator, alerts)
        self.state = TaskFormState()

    def on_title_change(self, value: str) -> None:
        self.state = with_title(self.state, value)

    def on_description_change(self, value: str) -> None:
        self.state = with_description(self.state, value)

    async def create(self) -> None:
        try:
            id = await self.service.create(self.state.title, self.state.description)
        except TaskServiceError as e:
            self._fail(e)
            return
        await self.navigator.navigate(task_path(id))

    def render(self) -> str:
        return render_task_new(self.state)
