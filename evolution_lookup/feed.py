from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from .config import AppConfig
from .errors import FetchError

LOGGER = logging.getLogger(__name__)


class FeedClient:
    """Thin wrapper around the proposals feed endpoint."""

    def __init__(self, conf: AppConfig) -> None:
        self._conf = conf
        self._session: requests.Session | None = None

    def _http_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = self._conf.user_agent
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "FeedClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_catalog(self) -> bytes:
        """Return the raw bytes of the proposals feed."""

        url = self._conf.feed_url
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return self._read_file(Path(unquote(parsed.path)))

        LOGGER.info("Fetching proposals feed from %s", url)
        try:
            response = self._http_session().get(url, timeout=self._conf.request_timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Could not fetch proposals feed from {url}: {exc}") from exc

        LOGGER.debug("Received %s bytes (HTTP %s)", len(response.content), response.status_code)
        return response.content

    @staticmethod
    def _read_file(path: Path) -> bytes:
        LOGGER.info("Reading proposals feed from %s", path)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FetchError(f"Could not read proposals feed at {path}: {exc}") from exc
