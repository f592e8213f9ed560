import os

# Defaults for the `http` command. Environment overrides are read once at import.
DEFAULT_PORT = int(os.environ.get("SENDPOINTS_PORT", 8080))
DEFAULT_TIMEOUT = os.environ.get("SENDPOINTS_TIMEOUT", "5s")
DEFAULT_SIZE = int(os.environ.get("SENDPOINTS_SIZE", 750))
DEFAULT_ITER = 0  # 0 means run until a request fails
DEFAULT_HOST_BOUND = 9223372036854775807  # max int64
DEFAULT_KEYSPACES = os.environ.get("SENDPOINTS_KEYSPACES", "keyspaces.json")

PUT_PATH = "/api/put"
METRIC_PREFIX = "sendPoints"

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2
