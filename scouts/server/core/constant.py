"""Application-wide constants of the HTTP server."""

from scouts import __version__

PROJECT_NAME = "Scouts"
API_V1_STR = "/api/v1"
VERSION = __version__
SCHEMA_VERSION = "v1"
