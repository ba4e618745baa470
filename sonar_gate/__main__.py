"""Allow running Sonar Gate with ``python -m sonar_gate``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
