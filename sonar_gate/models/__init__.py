"""Models for SonarQube API responses."""

from .task import Task, TaskStatus, TaskActivityResult
from .quality_gate import (
    ApiError,
    ApiErrorResponse,
    ProjectStatus,
    ProjectStatusResponse,
    QualityGateStatus,
)

__all__ = [
    'Task',
    'TaskStatus',
    'TaskActivityResult',
    'ApiError',
    'ApiErrorResponse',
    'ProjectStatus',
    'ProjectStatusResponse',
    'QualityGateStatus'
]
