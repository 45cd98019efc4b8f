"""Central configuration defaults and constants for the Death Mountain renderer."""

import os

# Page cycle defaults
# Comma-separated page names shown when the adventurer is not in battle
_normal_pages_env = os.getenv("DMR_NORMAL_PAGES", "")
DEFAULT_NORMAL_PAGES = [page.strip() for page in _normal_pages_env.split(",") if page.strip()] or [
    "inventory",
    "item_bag",
]
DEFAULT_PAGE_DISPLAY_SECONDS = int(os.getenv("DMR_PAGE_DISPLAY_SECONDS", "4"))  # Time each page stays on screen
DEFAULT_PAGE_TRANSITION_SECONDS = int(os.getenv("DMR_PAGE_TRANSITION_SECONDS", "1"))  # Slide time to the next page

# Output checks
DEFAULT_VALIDATE_OUTPUT = os.getenv("DMR_VALIDATE_OUTPUT", "true").lower() in ("true", "1", "yes", "on")

# Export defaults
DEFAULT_OUTPUT_DIR = os.getenv("DMR_OUTPUT_DIR", "output")

# API defaults
DEFAULT_LOG_LEVEL = os.getenv("DMR_LOG_LEVEL", "INFO").upper()
DEFAULT_API_PORT = int(os.getenv("DMR_API_PORT", "5000"))
