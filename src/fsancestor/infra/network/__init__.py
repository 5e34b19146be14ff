from __future__ import annotations

"""
Network Communication Infrastructure.

HTTP access to remote tree manifests.
"""

from fsancestor.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT
from fsancestor.infra.network.manifest_client import fetch_tree_manifest

__all__ = [
    "fetch_tree_manifest",
    "USER_AGENT",
    "DEFAULT_TIMEOUT",
]
