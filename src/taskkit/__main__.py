"""Serve the task-tracking service: ``python -m taskkit``."""

from taskkit.config import Settings
from taskkit.core.api import run_app
from taskkit.main import create_app


def main() -> None:
    settings = Settings.from_env()
    run_app(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
