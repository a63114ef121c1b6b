"""Static values shared by the server package."""

PROJECT_NAME = "Blog List"
API_PREFIX = "/api"
VERSION = "1.0.0"
