"""Core functionality for Sonar Gate."""
