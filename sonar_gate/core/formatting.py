"""Text formatting for compute engine tasks."""

from typing import Sequence

import click
from tabulate import tabulate

from ..models.task import Task, TaskStatus

STATUS_COLORS = {
    TaskStatus.PENDING.value: "yellow",
    TaskStatus.IN_PROGRESS.value: "blue",
}


def format_tasks_table(tasks: Sequence[Task]) -> str:
    """Format pending tasks as a table.

    Args:
        tasks: Tasks to display

    Returns:
        Formatted table string
    """
    headers = ["ID", "Type", "Component", "Status", "Submitted"]
    table_data = []
    for task_item in tasks:
        status = task_item.status or ""
        status_display = click.style(status, fg=STATUS_COLORS.get(status, "white"))
        table_data.append([
            task_item.id or "",
            task_item.task_type or "",
            task_item.component_key or "",
            status_display,
            task_item.submitted_at or "",
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple")
