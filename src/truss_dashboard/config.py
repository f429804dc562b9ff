"""Runtime settings, read from the environment."""

import os

BASE_URL = os.getenv("PARAGON_API_BASE_URL", "https://designserver.paragontruss.com/")
API_KEY = os.getenv("PARAGON_API_KEY", "")
REQUEST_TIMEOUT = float(os.getenv("PARAGON_API_TIMEOUT", "30"))

# The vendor's OpenAPI document, shipped next to the deployment.
OPENAPI_PATH = os.getenv("TRUSS_OPENAPI_PATH", "v1.json")

HEALTH_CHECK_PATH = "/api/public/projects"
