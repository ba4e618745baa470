"""Main CLI entry point for Sonar Gate."""

import click

from ..core.constants import (
    DEFAULT_REFRESH_PERIOD,
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT,
    ENV_PROJECT_KEY,
    ENV_REFRESH_PERIOD,
    ENV_SERVER_URL,
    ENV_TIMEOUT,
    ENV_TOKEN,
    EXIT_FAILURE,
    EXIT_MISSING_ARGUMENTS,
    EXIT_SUCCESS,
)
from ..core.quality_gate import is_quality_gate_passed
from ..core.task_poller import wait_for_pending_tasks
from ..services import SonarService
from .helpers import configure_logging


@click.command()
@click.option('-server', '--server', 'server', envvar=ENV_SERVER_URL,
              default=DEFAULT_SERVER_URL, show_default=True,
              help='Sonar server address to use for API calls')
@click.option('-project', '--project', 'project', envvar=ENV_PROJECT_KEY, default='',
              help='Sonar project (value from sonar.projectKey for your project) '
                   'to check state of Quality Gate status')
@click.option('-token', '--token', 'token', envvar=ENV_TOKEN, default='',
              help='User token for SonarQube to execute API requests. '
                   'User has to have browse permission for the provided project')
@click.option('-timeout', '--timeout', 'timeout', envvar=ENV_TIMEOUT,
              type=click.IntRange(min=0), default=DEFAULT_TIMEOUT, show_default=True,
              help='Timeout in seconds to wait for pending tasks to finish execution')
@click.option('-refresh_period', '--refresh-period', 'refresh_period',
              envvar=ENV_REFRESH_PERIOD, type=click.IntRange(min=1),
              default=DEFAULT_REFRESH_PERIOD, show_default=True,
              help='Status refresh period in seconds')
@click.option('--show-tasks', is_flag=True, help='Print the pending tasks on every refresh')
@click.option('-v', '--verbose', is_flag=True, help='Log API requests to stderr')
@click.pass_context
def cli(ctx, server, project, token, timeout, refresh_period, show_tasks, verbose):
    """Sonar Gate - Wait for SonarQube analysis and check the Quality Gate.

    Exits with 0 when no task is left pending and the Quality Gate status
    is OK, and with 1 otherwise.
    """
    configure_logging(verbose)
    click.echo("Running SonarQube Quality Gate checker!")

    if not project or not token:
        click.echo("Project key and token arguments are required!")
        ctx.exit(EXIT_MISSING_ARGUMENTS)

    click.echo("Checking if any tasks are running for the provided project...")
    with SonarService(server, token) as service:
        if not wait_for_pending_tasks(
            service, project, timeout, refresh_period, show_tasks=show_tasks
        ):
            click.echo(f"\nFailed to wait for project {project} run out of tasks!\n")
            ctx.exit(EXIT_FAILURE)

        click.echo(f"\nAll tasks on project {project} are finished!\n")
        click.echo("Checking Quality Gate status of the project...")
        if is_quality_gate_passed(service, project):
            ctx.exit(EXIT_SUCCESS)
        ctx.exit(EXIT_FAILURE)


if __name__ == '__main__':
    cli()
