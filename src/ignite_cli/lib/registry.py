"""npm registry lookups."""

from urllib.parse import quote

import httpx

from ._util.logging_utils import _log_debug
from .core.config import registry_timeout, registry_url
from .errors import RegistryError


class RegistryClient:
    """Minimal read-only client for the npm registry."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url or registry_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else registry_timeout()
        self._http_client: httpx.Client | None = None

    def _get_http_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self.timeout, follow_redirects=True)
        return self._http_client

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def package_url(self, name: str) -> str:
        # Scoped names keep their "@" but the "/" must be encoded.
        return f"{self.base_url}/{quote(name, safe='@')}"

    def package_exists(self, name: str) -> bool:
        """Return True if *name* is published, False if the registry says 404.

        Raises:
            RegistryError: on network failures or unexpected status codes.
        """
        url = self.package_url(name)
        _log_debug(f"registry: GET {url}")
        try:
            response = self._get_http_client().get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            raise RegistryError(f"Cannot reach the npm registry at {self.base_url}: {exc}") from exc

        _log_debug(f"registry: {name} -> {response.status_code}")
        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise RegistryError(
            f"Unexpected response from the npm registry for '{name}': HTTP {response.status_code}"
        )
