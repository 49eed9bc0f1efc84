# arma3points/http_client.py

from __future__ import annotations

import http.client
import logging
import socket
from typing import Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from arma3points.settings import HEADERS, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Raised when a page cannot be retrieved (timeout, DNS, HTTP status)."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class PageClient:
    """Fetch HTML pages with fixed headers and a hard timeout. No retries."""

    def __init__(
        self,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.headers = dict(headers if headers is not None else HEADERS)

    @staticmethod
    def _decode(raw: bytes, charset: Optional[str]) -> str:
        try:
            return raw.decode(charset or "utf-8", errors="replace")
        except LookupError:
            return raw.decode("utf-8", errors="replace")

    def get_html(self, url: str) -> str:
        logger.debug("GET %s", url)
        req = Request(url, headers=self.headers, method="GET")
        try:
            with urlopen(req, timeout=self.timeout_seconds) as resp:
                charset = None
                if getattr(resp, "headers", None) is not None:
                    charset = resp.headers.get_content_charset()
                return self._decode(resp.read(), charset)
        except HTTPError as exc:
            raise NetworkError(url, f"HTTP {exc.code} {exc.reason} for {url}") from exc
        except URLError as exc:
            raise NetworkError(url, f"Could not reach {url}: {exc.reason}") from exc
        except (socket.timeout, TimeoutError) as exc:
            raise NetworkError(url, f"Timed out after {self.timeout_seconds}s: {url}") from exc
        except http.client.HTTPException as exc:
            raise NetworkError(url, f"Bad HTTP response from {url}: {exc!r}") from exc
        except OSError as exc:
            raise NetworkError(url, f"Connection error for {url}: {exc}") from exc
