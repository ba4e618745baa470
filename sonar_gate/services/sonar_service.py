"""SonarQube service for abstracting Web API operations."""

import json
import logging
from typing import Any, Mapping, Optional

import httpx
from pydantic import ValidationError

from ..core.constants import (
    CE_ACTIVITY_PATH,
    DEFAULT_HTTP_TIMEOUT,
    PENDING_TASK_STATUSES,
    PROJECT_STATUS_PATH,
)
from ..models.quality_gate import ApiErrorResponse, ProjectStatus, ProjectStatusResponse
from ..models.task import TaskActivityResult
from .exceptions import SonarApiError, SonarDecodeError, SonarRequestError

logger = logging.getLogger(__name__)


class SonarService:
    """Service for SonarQube API calls authenticated with a user token."""

    def __init__(
        self,
        server_url: str,
        token: str,
        password: str = "",
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize SonarQube service.

        Args:
            server_url: Base URL of the server, e.g. http://localhost:9000/
            token: User token, sent as the Basic Auth username
            password: Basic Auth password (empty for tokens)
            timeout: Transport timeout in seconds for a single request
            transport: Optional httpx transport (used by tests)
        """
        self.server_url = server_url
        self._client = httpx.Client(
            auth=(token, password),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "SonarService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def _build_url(self, api_path: str) -> str:
        """Join the server URL and a relative API path."""
        return self.server_url.rstrip("/") + "/" + api_path.lstrip("/")

    def _request(
        self,
        api_path: str,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        """Issue a single request and return the raw response body.

        The status code is not inspected; callers decide from the body.

        Raises:
            SonarRequestError: If the request cannot be built or sent
        """
        url = self._build_url(api_path)
        logger.debug(f"{method} {url} params={dict(params or {})}")
        try:
            response = self._client.request(method, url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SonarRequestError(f"Request to {url} failed: {e}") from e

        body = response.read()
        response.close()
        logger.debug(f"{method} {url} -> HTTP {response.status_code}, {len(body)} bytes")
        return body

    def get_pending_tasks(self, project_key: str) -> TaskActivityResult:
        """Get the tasks still pending or in progress for a project.

        Args:
            project_key: Project (component) key

        Returns:
            Snapshot of the pending and in-progress tasks

        Raises:
            SonarRequestError: If the request fails
            SonarDecodeError: If the response is not a task list
        """
        body = self._request(
            CE_ACTIVITY_PATH,
            params={
                "status": ",".join(PENDING_TASK_STATUSES),
                "component": project_key,
            },
        )
        try:
            result = TaskActivityResult.model_validate_json(body)
        except ValidationError as e:
            raise SonarDecodeError(f"Failed to decode task activity response: {e}") from e

        logger.debug(f"{len(result.tasks)} pending tasks for {project_key}")
        return result

    def get_project_status(self, project_key: str) -> ProjectStatus:
        """Get the quality gate status of a project.

        The body is parsed once; a non-empty ``errors`` list takes priority
        over the success envelope.

        Args:
            project_key: Project key

        Returns:
            Quality gate status of the project

        Raises:
            SonarRequestError: If the request fails
            SonarApiError: If the server answers with an error envelope
            SonarDecodeError: If the response matches neither envelope
        """
        body = self._request(PROJECT_STATUS_PATH, params={"projectKey": project_key})
        try:
            data = json.loads(body)
        except ValueError as e:
            raise SonarDecodeError(f"Failed to decode project status response: {e}") from e

        if isinstance(data, dict) and data.get("errors"):
            try:
                errors = ApiErrorResponse.model_validate(data)
            except ValidationError as e:
                raise SonarDecodeError(f"Failed to decode error response: {e}") from e
            raise SonarApiError(
                "Failed to get project status through API: " + "; ".join(errors.messages),
                messages=errors.messages,
                body=body.decode("utf-8", errors="replace"),
            )

        try:
            response = ProjectStatusResponse.model_validate(data)
        except ValidationError as e:
            raise SonarDecodeError(f"Failed to decode project status response: {e}") from e

        logger.debug(f"Quality gate status for {project_key}: {response.project_status.status}")
        return response.project_status
