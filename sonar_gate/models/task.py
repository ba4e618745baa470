"""Compute engine task models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TaskStatus(str, Enum):
    """Compute engine task status enumeration."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


class Task(BaseModel):
    """A background analysis task reported by ``api/ce/activity``.

    Tasks are only counted, so every field is optional and ``status`` is a
    plain string: an unexpected value or a JSON null still decodes.
    """

    organization: Optional[str] = None
    id: Optional[str] = None
    task_type: Optional[str] = Field(None, alias="taskType")
    component_id: Optional[str] = Field(None, alias="componentId")
    component_key: Optional[str] = Field(None, alias="componentKey")
    component_name: Optional[str] = Field(None, alias="componentName")
    component_qualifier: Optional[str] = Field(None, alias="componentQualifier")
    status: Optional[str] = None
    submitted_at: Optional[str] = Field(None, alias="submittedAt")
    started_at: Optional[str] = Field(None, alias="startedAt")
    executed_at: Optional[str] = Field(None, alias="executedAt")
    execution_time_ms: Optional[int] = Field(None, alias="executionTimeMs")
    logs: Optional[bool] = None
    error_message: Optional[str] = Field(None, alias="errorMessage")
    has_error_stacktrace: Optional[bool] = Field(None, alias="hasErrorStacktrace")
    has_scanner_context: Optional[bool] = Field(None, alias="hasScannerContext")

    class Config:
        frozen = True
        populate_by_name = True


class TaskActivityResult(BaseModel):
    """Tasks currently pending or in progress for a component."""

    tasks: List[Task] = Field(default_factory=list)

    class Config:
        frozen = True

    @field_validator("tasks", mode="before")
    @classmethod
    def _null_tasks_as_empty(cls, value):
        return [] if value is None else value
