from __future__ import annotations

"""
Domain Constants.

Public sentinel strings returned by the ancestor lookup, plus
application-wide identifiers and versioning.
"""

APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# LOOKUP SENTINELS
# -----------------------------------------------------------------------------
ROOT_NOT_FOUND = "Root not found"
PARENT_NOT_FOUND = "Parent not found"

SENTINELS = (ROOT_NOT_FOUND, PARENT_NOT_FOUND)

# -----------------------------------------------------------------------------
# TREE SOURCES
# -----------------------------------------------------------------------------
MANIFEST_EXTENSION = ".json"
REMOTE_SCHEMES = ("http://", "https://")
PATH_SEPARATOR = "/"
