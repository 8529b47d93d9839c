"""
Endpoint Registry

Answers "what would GET <path> return" from a published output directory,
without starting a server. Payloads are loaded lazily and cached per registry.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from vita.contexts.publishing.endpoint_writer import ROOT_FILENAME, endpoint_filename
from vita.contexts.publishing.exceptions import EndpointNotFoundError
from vita.contexts.publishing.logger import _log_debug, _log_warning
from vita.utils.config_resolver import DATA_PATH

ROOT_PATH = "/"
ALLOWED_METHOD = "GET"
ROUTE_PREFIX = f"{ALLOWED_METHOD} "
METHOD_NOT_ALLOWED = "Method not allowed. This API only supports GET requests."


def normalize_path(path: str) -> str:
    """
    Normalize a request path: strip trailing slashes, ensure a leading one.

    Example:
        >>> normalize_path("/about//")
        '/about'
        >>> normalize_path("")
        '/'
    """
    path = path.strip().rstrip("/")
    if not path:
        return ROOT_PATH
    if not path.startswith("/"):
        path = f"/{path}"
    return path


class EndpointRegistry:
    """
    Registry for resolving endpoint paths against published JSON files.

    The directory file (root.json) decides which endpoints exist; each
    listed endpoint is served from "<endpoint>.json" in the same directory.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize the endpoint registry.

        Args:
            data_dir: Published output directory. Defaults to PROFILE_DATA_PATH
        """
        if data_dir is None:
            data_dir = DATA_PATH

        self.data_dir = Path(data_dir)
        self._cache: Dict[str, Any] = {}

    # =========================================================================
    # LOADING
    # =========================================================================

    def _load(self, path: str, filename: str) -> Any:
        if path in self._cache:
            return self._cache[path]

        file_path = self.data_dir / filename
        with open(file_path, encoding="utf-8") as f:
            payload = json.load(f)

        _log_debug(f"Loaded {file_path}")
        self._cache[path] = payload
        return payload

    def root(self) -> Dict[str, Any]:
        """
        Load the directory payload.

        Raises:
            EndpointNotFoundError: If root.json has not been published
        """
        if not (self.data_dir / ROOT_FILENAME).is_file():
            raise EndpointNotFoundError(
                ROOT_PATH, [], message=f"No {ROOT_FILENAME} in {self.data_dir}"
            )
        return self._load(ROOT_PATH, ROOT_FILENAME)

    def available_endpoints(self) -> List[str]:
        """Endpoint paths listed in root.json ("/about", ...), in listed order."""
        if not (self.data_dir / ROOT_FILENAME).is_file():
            return []
        routes = self.root().get("endpoints", {})
        return [route[len(ROUTE_PREFIX) :] if route.startswith(ROUTE_PREFIX) else route for route in routes]

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def get(self, path: str) -> Any:
        """
        Get the payload served at path.

        Args:
            path: Request path ("/", "/about", "/track-record/")

        Returns:
            Parsed JSON (root directory or endpoint envelope)

        Raises:
            EndpointNotFoundError: If no listed endpoint matches
        """
        path = normalize_path(path)
        if path == ROOT_PATH:
            return self.root()

        available = self.available_endpoints()
        if path not in available:
            raise EndpointNotFoundError(path, available)

        filename = endpoint_filename(path.lstrip("/"))
        if not (self.data_dir / filename).is_file():
            raise EndpointNotFoundError(path, available, message=f"No endpoint at {path} ({filename} missing)")

        return self._load(path, filename)

    def resolve(self, path: str, method: str = ALLOWED_METHOD) -> Tuple[int, Dict[str, Any]]:
        """
        Resolve a request into (status, body) the way the served API answers it.

        Returns:
            (200, payload), (404, not-found body) or (405, method error body)
        """
        if method.upper() != ALLOWED_METHOD:
            return 405, {"error": METHOD_NOT_ALLOWED}

        path = normalize_path(path)
        try:
            return 200, self.get(path)
        except EndpointNotFoundError as e:
            return 404, {
                "error": "Not found",
                "message": f"No endpoint at {path}",
                "available_endpoints": e.available_endpoints,
            }

    def verify(self) -> Dict[str, bool]:
        """
        Check that every endpoint listed in root.json resolves to an envelope.

        Returns:
            Endpoint path -> True if its file exists and holds meta and data
        """
        results = {}
        for path in self.available_endpoints():
            try:
                payload = self.get(path)
            except (EndpointNotFoundError, json.JSONDecodeError):
                payload = None

            ok = isinstance(payload, dict) and "meta" in payload and "data" in payload
            if not ok:
                _log_warning(f"Endpoint {path} does not resolve to an envelope")
            results[path] = ok
        return results

    def clear_cache(self):
        """Clear the payload cache."""
        self._cache.clear()

    def is_cached(self, path: str) -> bool:
        """Check if the payload for a path is in the cache."""
        return normalize_path(path) in self._cache
