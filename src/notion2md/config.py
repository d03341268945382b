"""Local configuration for notion2md."""

from __future__ import annotations

import os


DEFAULT_API_BASE_URL = "https://api.notion.com/v1"
DEFAULT_API_VERSION = "2022-06-28"
# The image lookup pins the version whose block payload carries image.file.url.
DEFAULT_IMAGE_API_VERSION = "2021-08-16"
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_FETCH_MAX_RETRIES = 0
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_PAGE_SIZE = 100
DEFAULT_USER_AGENT = "notion2md/0.1"
DEFAULT_LOG_LEVEL = "INFO"

NOTION2MD_TOKEN = os.getenv("NOTION2MD_TOKEN", "")
NOTION2MD_API_BASE_URL = os.getenv("NOTION2MD_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
NOTION2MD_API_VERSION = os.getenv("NOTION2MD_API_VERSION", DEFAULT_API_VERSION)
NOTION2MD_IMAGE_API_VERSION = os.getenv("NOTION2MD_IMAGE_API_VERSION", DEFAULT_IMAGE_API_VERSION)
NOTION2MD_FETCH_TIMEOUT_S = float(os.getenv("NOTION2MD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
NOTION2MD_FETCH_MAX_RETRIES = int(os.getenv("NOTION2MD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
NOTION2MD_FETCH_BACKOFF_S = float(os.getenv("NOTION2MD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
NOTION2MD_PAGE_SIZE = int(os.getenv("NOTION2MD_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
NOTION2MD_USER_AGENT = os.getenv("NOTION2MD_USER_AGENT", DEFAULT_USER_AGENT)
NOTION2MD_LOG_LEVEL = os.getenv("NOTION2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL)
