from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from fsancestor.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_tree_manifest(url: str, timeout: int = DEFAULT_TIMEOUT) -> Optional[Dict[str, Any]]:
    """Download a JSON tree manifest. Returns None on any transport or format failure."""
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    logger.debug(f"Fetching tree manifest from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()

        data = response.json()

        if not isinstance(data, dict):
            logger.warning("Network: Received malformed manifest (root is not an object).")
            return None

        size_kb = len(response.content) / 1024
        logger.info(f"Network: Tree manifest downloaded ({size_kb:.1f} KB).")
        return data

    except requests.exceptions.Timeout:
        logger.warning(f"Network: Manifest download timed out after {timeout}s.")
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error while fetching manifest: {e}")
    except (ValueError, RecursionError) as e:
        logger.error(f"Network: Manifest is not valid JSON: {e}")

    return None
