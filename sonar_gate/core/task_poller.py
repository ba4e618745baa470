"""Wait for the compute engine to finish a project's background tasks."""

import logging
import time
from typing import Callable, Optional

import click

from ..services import SonarService, SonarServiceError
from .formatting import format_tasks_table

logger = logging.getLogger(__name__)


def wait_for_pending_tasks(
    service: SonarService,
    project_key: str,
    timeout: float,
    refresh_period: float,
    sleep: Optional[Callable[[float], None]] = None,
    show_tasks: bool = False,
) -> bool:
    """Poll the server until no task is pending for the project.

    The server is queried at least once. Elapsed time is the sum of the
    refresh periods slept, so the wait may exceed ``timeout`` by up to one
    refresh period.

    Args:
        service: Service used for the activity queries
        project_key: Project (component) key
        timeout: Total time to wait, in seconds
        refresh_period: Pause between two queries, in seconds
        sleep: Sleep function (defaults to time.sleep)
        show_tasks: Print a table of the pending tasks after each query

    Returns:
        bool: True once no task is pending, False on error or timeout
    """
    sleep = sleep or time.sleep
    elapsed = 0.0
    click.echo("\nWaiting for pending tasks to finish...")
    while True:
        try:
            result = service.get_pending_tasks(project_key)
        except SonarServiceError as e:
            click.echo("Failed to perform SonarQube API request for activities!")
            click.echo(f"Error: {e}")
            return False

        tasks_count = len(result.tasks)
        click.echo(
            f"\r{tasks_count} pending tasks remaining for {project_key} component...",
            nl=False,
        )
        if tasks_count == 0:
            return True

        if show_tasks:
            click.echo()
            click.echo(format_tasks_table(result.tasks))

        sleep(refresh_period)
        elapsed += refresh_period
        logger.debug(f"Waited {elapsed}s of {timeout}s for {project_key}")
        if elapsed >= timeout:
            break

    click.echo("\nTimeout reached!")
    return False
