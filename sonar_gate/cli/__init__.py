"""Command line interface for Sonar Gate."""
