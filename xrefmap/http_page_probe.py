"""HEAD-request implementation of the page-exists capability.

Probes are retried on transient failures (timeouts, connection errors, broken
or undecodable responses, 5xx and 429) with exponential backoff and jitter. A probe instance is shared
by all resolver threads, so it also caps the number of requests in flight and
spaces consecutive requests to stay under the site's throttling limits.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from xrefmap.errors import TransientProbeError

logger = logging.getLogger(__name__)

USER_AGENT = "unity-xrefmap (+https://dotnet.github.io/docfx/)"
HTTP_OK = 200
HTTP_TOO_MANY_REQUESTS = 429
HTTP_SERVER_ERROR = 500


@dataclass(frozen=True)
class ProbeSettings:
    """Timeouts, retry and throttling limits for page probes."""

    timeout: float = 10.0
    max_attempts: int = 3
    backoff_initial: float = 0.5
    backoff_max: float = 8.0
    max_concurrent: int = 8
    min_interval: float = 0.0

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ProbeSettings:
        """Build settings from the ``probe`` section of the configuration."""
        probe = config.get("probe", {})
        return cls(
            timeout=float(probe.get("timeout", cls.timeout)),
            max_attempts=max(1, int(probe.get("max_attempts", cls.max_attempts))),
            backoff_initial=float(probe.get("backoff_initial", cls.backoff_initial)),
            backoff_max=float(probe.get("backoff_max", cls.backoff_max)),
            max_concurrent=max(1, int(probe.get("max_concurrent", cls.max_concurrent))),
            min_interval=float(probe.get("min_interval", cls.min_interval)),
        )


class HttpPageProbe:
    """Checks page existence with ``HEAD`` requests."""

    def __init__(
        self,
        settings: ProbeSettings | None = None,
        session_factory: Callable[[], requests.Session] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the probe.

        ``session_factory`` is called once per worker thread, since
        ``requests.Session`` is not safe to share between threads.
        """
        self.settings = settings or ProbeSettings()
        self._session_factory = session_factory or self._default_session
        self._sleep = sleep
        self._local = threading.local()
        self._slots = threading.BoundedSemaphore(self.settings.max_concurrent)
        self._pace_lock = threading.Lock()
        self._next_request_at = 0.0

    @staticmethod
    def _default_session() -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = USER_AGENT
        return session

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
        return session

    def _pace(self) -> None:
        """Wait until at least ``min_interval`` has passed since the last request."""
        if self.settings.min_interval <= 0:
            return
        with self._pace_lock:
            now = time.monotonic()
            wait = self._next_request_at - now
            self._next_request_at = max(now, self._next_request_at) + (
                self.settings.min_interval
            )
        if wait > 0:
            self._sleep(wait)

    def _head(self, url: str) -> int:
        """Issue one HEAD request and return its status code."""
        self._pace()
        with self._slots:
            try:
                response = self._session().head(
                    url, timeout=self.settings.timeout, allow_redirects=False
                )
            except requests.Timeout as exc:
                raise TransientProbeError(url, "timeout") from exc
            except requests.ConnectionError as exc:
                raise TransientProbeError(url, "connection error") from exc
            except requests.RequestException as exc:
                raise TransientProbeError(url, "invalid response") from exc
        status = response.status_code
        if status >= HTTP_SERVER_ERROR or status == HTTP_TOO_MANY_REQUESTS:
            raise TransientProbeError(url, f"HTTP {status}")
        return status

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception_type(TransientProbeError),
            stop=stop_after_attempt(self.settings.max_attempts),
            wait=wait_exponential_jitter(
                initial=self.settings.backoff_initial, max=self.settings.backoff_max
            ),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            reraise=True,
        )

    def status(self, url: str) -> int | None:
        """Return the status code for ``url``, or None if every attempt failed."""
        try:
            return self._retrying()(self._head, url)
        except TransientProbeError as exc:
            logger.warning(
                "Giving up on %s after %d attempts: %s",
                url,
                self.settings.max_attempts,
                exc,
            )
            return None

    def exists(self, url: str) -> bool:
        """Return True if ``url`` answers with HTTP 200."""
        status = self.status(url)
        logger.debug("HEAD %s -> %s", url, status)
        return status == HTTP_OK
