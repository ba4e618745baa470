"""Constants used throughout the Sonar Gate application."""


# Server defaults
DEFAULT_SERVER_URL = "http://localhost:9000/"
DEFAULT_TIMEOUT = 300  # 5 minutes to wait for pending tasks
DEFAULT_REFRESH_PERIOD = 1
DEFAULT_HTTP_TIMEOUT = 30.0  # per request, transport level

# API endpoints (relative to the server URL)
CE_ACTIVITY_PATH = "api/ce/activity"
PROJECT_STATUS_PATH = "api/qualitygates/project_status"
PENDING_TASK_STATUSES = ("PENDING", "IN_PROGRESS")

# Output
SEPARATOR = "=============================================="

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_MISSING_ARGUMENTS = 2

# Environment variables
ENV_SERVER_URL = "SONAR_HOST_URL"
ENV_PROJECT_KEY = "SONAR_PROJECT_KEY"
ENV_TOKEN = "SONAR_TOKEN"
ENV_TIMEOUT = "SONAR_GATE_TIMEOUT"
ENV_REFRESH_PERIOD = "SONAR_GATE_REFRESH_PERIOD"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
