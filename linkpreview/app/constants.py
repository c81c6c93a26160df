"""Service-level constants shared across modules."""
from __future__ import annotations

FAVICON_SERVICE_URL = "https://www.google.com/s2/favicons?domain={domain}&sz=32"
EXTERNAL_LINK_TITLE = "External Link"
GENERIC_DESCRIPTION = "Visit link for more information"


class DEPLOYMENT_MODE:
    PRODUCTION = "production"
    DEVELOPMENT = "development"


class LINK_TYPE:
    REPOSITORY = "repository"
    PROFILE = "profile"
    VIDEO = "video"
    DEMO = "demo"
    SANDBOX = "sandbox"
    WEBSITE = "website"
