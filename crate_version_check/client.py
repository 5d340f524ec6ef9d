"""
HTTP client for the crates.io registry API.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from . import __version__
from .errors import RequestFailure
from .interfaces import Fetcher


logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://crates.io"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"crate-version-check/{__version__}"


class RegistryClient(Fetcher):
    """Fetch crate metadata from a crates.io compatible registry.

    The body is returned whatever the HTTP status; a body without a version
    field is reported by the extractor, not here.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def crate_url(self, package_name: str) -> str:
        # Inserted verbatim; callers pass registry-safe names.
        return f"{self.base_url}/api/v1/crates/{package_name}"

    def fetch(self, package_name: str) -> str:
        url = self.crate_url(package_name)
        logger.info("Fetching registry metadata for %s", package_name)
        try:
            with self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            ) as response:
                logger.debug("GET %s -> %s", url, response.status_code)
                if not response.ok:
                    logger.warning(
                        "Registry returned HTTP %s for %s", response.status_code, package_name
                    )
                return response.text
        except requests.RequestException as e:
            logger.warning("Request for %s failed: %s", package_name, e)
            raise RequestFailure(url, e) from e

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
