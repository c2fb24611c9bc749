PROJECT_NAME = "Stay With Friends API"
API_PREFIX = "/api"
UPLOADS_ROUTE = "/uploads"
VERSION = "0.1.0"
