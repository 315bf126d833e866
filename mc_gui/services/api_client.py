"""JSON REST client for the platform backend."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping
from urllib import error, parse, request

from mc_common.errors import BackendRequestError

logger = logging.getLogger(__name__)


def _validate_http_url(url: str, label: str) -> str:
    parsed = parse.urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{label} must be an http(s) URL, got: {url}")
    return url


@dataclass
class ApiClient:
    """Minimal JSON API client with bearer auth and retry on 5xx."""

    base_url: str
    token: str | None = None
    timeout_seconds: float = 10.0
    max_retries: int = 2
    backoff_base: float = 0.25
    backoff_factor: float = 2.0

    def __post_init__(self) -> None:
        self.base_url = _validate_http_url(self.base_url.rstrip("/"), "API base_url")

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` with optional query parameters and decode the JSON body."""
        query = ""
        if params:
            clean = {k: v for k, v in params.items() if v is not None}
            query = f"?{parse.urlencode(clean)}" if clean else ""
        return self._request("GET", f"{path}{query}")

    def post(self, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        """POST a JSON payload to ``path`` and decode the JSON body."""
        return self._request("POST", path, payload=payload)

    def _request(
        self,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        context = {"method": method, "url": url}

        for attempt in range(self.max_retries + 1):
            try:
                req = request.Request(url, data=data, headers=headers, method=method)
                with request.urlopen(  # nosec B310
                    req, timeout=self.timeout_seconds
                ) as resp:
                    body = resp.read().decode("utf-8")
                logger.debug("%s %s -> %s", method, url, resp.status)
                return self._parse_json(body, context)
            except error.HTTPError as exc:
                body = exc.read().decode("utf-8") if exc.fp else ""
                failure = BackendRequestError(
                    self._error_message(exc.code, body),
                    context={**context, "status": exc.code},
                    cause=exc,
                )
            except error.URLError as exc:
                failure = BackendRequestError(
                    f"API request failed: {exc.reason}",
                    context={**context, "reason": exc.reason},
                    cause=exc,
                )
            if not failure.retryable or attempt >= self.max_retries:
                raise failure
            logger.debug("Retrying %s %s after: %s", method, url, failure)
            self._sleep_backoff(attempt)
        raise BackendRequestError("API request failed after retries", context=context)

    @staticmethod
    def _parse_json(body: str, context: Mapping[str, Any]) -> Any:
        if not body:
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise BackendRequestError(
                "API returned invalid JSON", context=context, cause=exc
            ) from exc

    @staticmethod
    def _error_message(status: int, body: str) -> str:
        # Backend errors come back as {"error": "..."}.
        try:
            parsed = json.loads(body) if body else None
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict) and parsed.get("error"):
            return str(parsed["error"])
        return f"API error {status}"

    def _sleep_backoff(self, attempt: int) -> None:
        delay = self.backoff_base * (self.backoff_factor ** attempt)
        if delay > 0:
            time.sleep(delay)
