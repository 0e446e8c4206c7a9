"""Client shell: resolves locations to task views and acts as their navigator."""

from __future__ import annotations

import re

from taskkit.core.logging import get_logger

from .service import TaskService
from .views import Alerts, TaskDetails, TaskEdit, TaskList, TaskNew, TaskView, render_menu

logger = get_logger(__name__)

_DETAILS = re.compile(r"^/tasks/(\d+)$")
_EDIT = re.compile(r"^/tasks/(\d+)/edit$")


class ClientApp:
    """Hash-style router over the task views."""

    def __init__(self, service: TaskService, alerts: Alerts) -> None:
        self.service = service
        self.alerts = alerts
        self.path = "/"
        self.view: TaskView | None = None

    def resolve(self, path: str) -> TaskView | None:
        """Return a fresh view for ``path``; the root path has no view."""
        if path == "/":
            return None
        if path == "/tasks":
            return TaskList(self.service, self, self.alerts)
        if path == "/tasks/new":
            return TaskNew(self.service, self, self.alerts)
        if match := _EDIT.match(path):
            return TaskEdit(int(match.group(1)), self.service, self, self.alerts)
        if match := _DETAILS.match(path):
            return TaskDetails(int(match.group(1)), self.service, self, self.alerts)
        raise LookupError(f"No view for path {path!r}")

    async def navigate(self, path: str) -> None:
        """Switch to the view for ``path`` and mount it."""
        view = self.resolve(path)
        self.view = view
        self.path = path
        logger.debug("client.navigated", path=path)
        if view is not None:
            await view.mount()

    async def visit(self, path: str) -> TaskView | None:
        """Navigate to ``path`` and return its mounted view."""
        await self.navigate(path)
        return self.view

    def render(self) -> str:
        body = self.view.render() if self.view is not None else ""
        return render_menu() + body
