"""Quality gate verdict of a project."""

import click
from rich.console import Console
from rich.markup import escape

from ..models.quality_gate import QualityGateStatus
from ..services import SonarApiError, SonarService, SonarServiceError
from .constants import SEPARATOR

STATUS_STYLES = {
    QualityGateStatus.OK.value: "bold green",
    QualityGateStatus.WARN.value: "bold yellow",
}


def is_quality_gate_passed(service: SonarService, project_key: str) -> bool:
    """Check whether the project's quality gate passed.

    Args:
        service: Service used for the status query
        project_key: Project key

    Returns:
        bool: True only if the server reports an ``OK`` status
    """
    try:
        project_status = service.get_project_status(project_key)
    except SonarServiceError as e:
        if isinstance(e, SonarApiError):
            click.echo(e.body)
        click.echo(f"Failed to get project status for projectKey {project_key}")
        click.echo(f"Error: {e}")
        return False

    console = Console(highlight=False)
    style = STATUS_STYLES.get(project_status.status, "bold red")
    console.print()
    console.print(SEPARATOR)
    console.print(f"Project Status: [{style}]{escape(project_status.status)}[/{style}]")
    console.print(SEPARATOR)
    return project_status.passed
