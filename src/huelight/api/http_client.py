import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Mapping, Optional

import requests

from huelight.models.light import CommandTarget

logger = logging.getLogger(__name__)


class HttpClient:
    """Thin wrapper around a ``requests.Session`` for one bridge.

    Synchronous ``get``/``put``/``post`` are used for enumeration and pairing.
    ``issue`` sends light commands in the background on a single worker
    thread and returns the ``Future`` without waiting for it.
    """

    def __init__(self, base_url: str, headers: Optional[dict[str, str]] = None, *,
                 timeout: float = 5, session: Optional[requests.Session] = None):
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout = timeout
        self._executor: Optional[ThreadPoolExecutor] = None

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url

    def _request(self, method: str, path: str, payload: Optional[Mapping[str, Any]] = None,
                 timeout: Optional[float] = None) -> Any:
        url = self._url(path)
        logger.debug("%s %s %s", method, url, payload if payload is not None else "")
        r = self.session.request(method, url, json=payload, headers=self.headers,
                                 timeout=timeout or self.timeout)
        r.raise_for_status()
        try:
            return r.json()
        except ValueError:
            return None

    def get(self, path: str, *, timeout: Optional[float] = None) -> Any:
        return self._request("GET", path, timeout=timeout)

    def put(self, path: str, payload: Mapping[str, Any], *, timeout: Optional[float] = None) -> Any:
        return self._request("PUT", path, payload, timeout=timeout)

    def post(self, path: str, payload: Mapping[str, Any], *, timeout: Optional[float] = None) -> Any:
        return self._request("POST", path, payload, timeout=timeout)

    # ---- fire-and-forget commands
    def issue(self, target: CommandTarget, payload: Mapping[str, Any]) -> Future:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="huelight")
        body = dict(payload)
        future = self._executor.submit(self.put, target.url, body)
        future.add_done_callback(lambda f: self._log_failure(f, target, body))
        return future

    @staticmethod
    def _log_failure(future: Future, target: CommandTarget, payload: dict) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning("Command %s to %s failed: %s", payload, target.path, exc)

    def close(self) -> None:
        """Wait for pending commands, then close the session if this client created it."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
