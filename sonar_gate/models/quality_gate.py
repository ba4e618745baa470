"""Quality gate status models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class QualityGateStatus(str, Enum):
    """Quality gate verdicts returned by the server."""
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    NONE = "NONE"


class ProjectStatus(BaseModel):
    """Quality gate evaluation of a project."""

    # Kept as a plain string so unknown verdicts still decode
    status: str = ""

    class Config:
        frozen = True

    @property
    def passed(self) -> bool:
        """Only an exact ``OK`` verdict passes the gate."""
        return self.status == QualityGateStatus.OK.value


class ProjectStatusResponse(BaseModel):
    """Success envelope of ``api/qualitygates/project_status``."""

    project_status: ProjectStatus = Field(..., alias="projectStatus")

    class Config:
        frozen = True
        populate_by_name = True


class ApiError(BaseModel):
    """Single entry of an API error envelope."""

    msg: str = ""

    class Config:
        frozen = True


class ApiErrorResponse(BaseModel):
    """Error envelope the server returns instead of a result."""

    errors: List[ApiError] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def messages(self) -> List[str]:
        """Get the error texts."""
        return [error.msg for error in self.errors]
