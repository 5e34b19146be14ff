from __future__ import annotations

from fsancestor.domain.constants import APP_VERSION

USER_AGENT = f"FsAncestor-Client/{APP_VERSION}"
DEFAULT_TIMEOUT = 10
