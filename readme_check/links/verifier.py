"""
Link Verifier

Resolves every URL extracted from a README. Registry provider URLs are
judged by the registry's JSON error payload; all other URLs must answer
HTTP 200. URLs are verified concurrently on a bounded thread pool, and the
batch returns only once every URL has a result.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import requests

from readme_check import __version__
from readme_check.errors import RegistryResponseError
from readme_check.links.registry import (
    NAME_UNKNOWN,
    RegistryErrorResponse,
    decode_registry_response,
    is_registry_url,
)
from readme_check.report import ValidationIssue


logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"readme-check/{__version__}"


@dataclass
class LinkResult:
    """Verification outcome for one URL occurrence.

    Attributes:
        url: The verified URL
        valid: Whether the URL resolved successfully
        status_code: HTTP status code, None when no response was received
        error: Failure detail (network error, registry error, decode error)
        registry: Whether the registry rule was applied
    """
    url: str
    valid: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    registry: bool = False

    @property
    def message(self) -> str:
        if self.registry:
            if self.valid:
                return f"Registry URL: {self.url}, Status code: {self.status_code}"
            return f"Invalid registry URL: {self.url} ({self.error})"
        if self.error:
            return f"URL: {self.url}, Error: {self.error}"
        return f"URL: {self.url}, Status code: {self.status_code}"

    def to_issue(self) -> ValidationIssue:
        return ValidationIssue(
            level="info" if self.valid else "error",
            subject=self.url,
            message=self.message,
        )


class LinkVerifier:
    """Verifies URLs over HTTP.

    Example:
        >>> verifier = LinkVerifier(max_workers=4, timeout=5.0)
        >>> results = verifier.verify_all(["https://example.com"])
    """

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """Initialize the verifier.

        Args:
            max_workers: Maximum number of URLs verified at the same time.
            timeout: Per-request timeout in seconds.
            user_agent: User-Agent header sent with every request.
        """
        self.max_workers = max_workers
        self.timeout = timeout
        self.user_agent = user_agent
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Make every not-yet-started verification of the current batch fail.

        The flag is cleared once the batch finishes, so a later
        ``verify_all`` runs normally. Calling this between batches cancels
        the next one.
        """
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def fetch(self, url: str, stream: bool = False) -> requests.Response:
        """GET ``url``. With ``stream`` set only the headers are read up front."""
        logger.debug(f"GET {url} (timeout={self.timeout}s, stream={stream})")
        return requests.get(
            url,
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            stream=stream,
        )

    def check_registry_url(self, url: str) -> Tuple[bool, RegistryErrorResponse, int]:
        """Fetch a registry URL and inspect its error payload.

        Returns:
            Tuple of (is_valid, decoded payload, HTTP status code).

        Raises:
            requests.exceptions.RequestException: If the request fails.
            RegistryResponseError: If the body is not a registry error envelope.
        """
        response = self.fetch(url)
        payload = decode_registry_response(response.content, url=url)
        return not payload.name_unknown, payload, response.status_code

    def verify(self, url: str) -> LinkResult:
        """Verify a single URL. Failures are returned, not raised."""
        registry = is_registry_url(url)

        if self.cancelled:
            return LinkResult(url=url, valid=False, error="verification cancelled", registry=registry)

        if registry:
            result = self._verify_registry(url)
        else:
            result = self._verify_generic(url)

        if result.valid:
            logger.info(f"Success: {result.message}")
        else:
            logger.warning(f"Failed: {result.message}")
        return result

    def verify_all(self, urls: Sequence[str]) -> List[LinkResult]:
        """Verify every URL concurrently and wait for all of them.

        Args:
            urls: URLs in document order. Duplicates are verified separately.

        Returns:
            One LinkResult per URL, in the same order as ``urls``.
        """
        if not urls:
            return []

        workers = max(1, min(self.max_workers, len(urls)))
        logger.debug(f"Verifying {len(urls)} URL(s) with {workers} worker(s)")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="link-verify") as executor:
            try:
                futures = [executor.submit(self.verify, url) for url in urls]
            finally:
                # A cancel applies to one batch only
                executor.shutdown(wait=True)
                self._cancelled.clear()

        results: List[LinkResult] = []
        for url, future in zip(urls, futures):
            try:
                results.append(future.result())
            except Exception as e:
                logger.exception(f"Unexpected error verifying {url}")
                results.append(LinkResult(
                    url=url,
                    valid=False,
                    error=f"unexpected error: {e}",
                    registry=is_registry_url(url),
                ))
        return results

    def _verify_registry(self, url: str) -> LinkResult:
        try:
            valid, payload, status_code = self.check_registry_url(url)
        except requests.exceptions.RequestException as e:
            return LinkResult(url=url, valid=False, error=str(e), registry=True)
        except RegistryResponseError as e:
            return LinkResult(url=url, valid=False, error=str(e), registry=True)

        if valid:
            return LinkResult(url=url, valid=True, status_code=status_code, registry=True)

        detail = payload.find(NAME_UNKNOWN)
        error = NAME_UNKNOWN
        if detail is not None and detail.message:
            error = f"{NAME_UNKNOWN}: {detail.message}"
        return LinkResult(url=url, valid=False, status_code=status_code, error=error, registry=True)

    def _verify_generic(self, url: str) -> LinkResult:
        # Only the status line matters, so the body is never downloaded
        try:
            with self.fetch(url, stream=True) as response:
                status_code = response.status_code
        except requests.exceptions.RequestException as e:
            return LinkResult(url=url, valid=False, error=str(e))

        return LinkResult(url=url, valid=status_code == 200, status_code=status_code)
