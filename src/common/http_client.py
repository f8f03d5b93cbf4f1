"""Shared HTTP helpers used by the controller client.

Encapsulates common request/timeout error handling so callers avoid
duplicating try/except blocks. Failures surface as TransportError; nothing
here retries.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import requests

from constants import Constants
from common.errors import TransportError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _request(method: str, url: str, *, context: str, **kwargs: Any) -> requests.Response:
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action=method,
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.request(method, url, timeout=Constants.REQUEST_TIMEOUT, **kwargs)
        except requests.Timeout as exc:
            raise TransportError(
                context, f"request timed out after {Constants.REQUEST_TIMEOUT} seconds"
            ) from exc
        except requests.RequestException as exc:  # includes ConnectionError
            raise TransportError(context, f"connection error: {exc}") from exc

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action=method,
                    outcome="success" if res.ok else "http_error",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )

    if not res.ok:
        raise TransportError(
            context,
            f"{method} {safe_target} returned {res.status_code}: {res.text.strip()[:200]}",
            status_code=res.status_code,
        )
    return res


def safe_get(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """Perform a GET request with consistent error handling and DEBUG traces."""
    return _request("GET", url, context=context, **kwargs)


def safe_post(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """Perform a POST request with consistent error handling and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable operation name used in errors and logs.
        **kwargs: Passed through to requests (data, files, headers, ...).

    Returns:
        requests.Response: The HTTP response object.
    """
    return _request("POST", url, context=context, **kwargs)


def get_json(url: str, *, context: str, **kwargs: Any) -> Any:
    """GET a URL and decode its JSON body.

    Raises:
        TransportError: On network failure, non-2xx status or a body that is not JSON.
    """
    res = safe_get(url, context=context, **kwargs)
    try:
        return res.json()
    except (json.JSONDecodeError, ValueError) as exc:
        raise TransportError(context, f"invalid JSON from {safe_url(url)}") from exc
