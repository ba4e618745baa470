"""Sonar Gate - Wait for SonarQube analysis and enforce the quality gate in CI."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
