from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Base provider error."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


class MalformedPayload(ProviderError):
    """Raised when a successful response does not have the expected shape."""


@dataclass
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class for HTTP providers.

    Subclasses call :meth:`_get_json`, which turns every transport, status and
    decoding failure into ``None`` so that nothing raised by ``requests``
    crosses the provider boundary.
    """

    name = "provider"

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.api_key = api_key or ""
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def close(self) -> None:
        """Release the HTTP session and its connection pool."""
        self.session.close()

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("%s rate limited the key: %s", self.name, response.text[:200])
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("%s answered HTTP %s: %s", self.name, response.status_code, response.text[:200])
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        timeout = self.request_config.timeout
        try:
            response = self.session.request(method, url, timeout=timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("%s did not answer within %ss", url, timeout, exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Could not reach %s", url, exc_info=exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise MalformedPayload("invalid json") from exc
        if not isinstance(data, dict):
            raise MalformedPayload(f"expected an object, got {type(data).__name__}")
        return data

    def _get_json(
        self, url: str, params: Dict[str, Any], required: Sequence[str] = ()
    ) -> Optional[Dict[str, Any]]:
        if not self.configured:
            self._log.debug("No API key configured, skipping %s", url)
            return None
        params = dict(params, appid=self.api_key)
        try:
            data = self._json(self._request("GET", url, params=params))
            require_keys(data, *required)
            return data
        except QuotaExceeded:
            self._log.warning("%s quota exceeded, treating as unavailable", self.name)
            return None
        except MalformedPayload as exc:
            self._log.error("%s returned a malformed payload: %s", self.name, exc)
            return None
        except ProviderError as exc:
            self._log.warning("%s unavailable: %s", self.name, exc)
            return None


def require_keys(payload: Dict[str, Any], *keys: str) -> None:
    missing = [key for key in keys if key not in payload]
    if missing:
        raise MalformedPayload(f"missing {', '.join(missing)}")


__all__ = [
    "MalformedPayload",
    "ProviderError",
    "QuotaExceeded",
    "RequestConfig",
    "WeatherProvider",
    "require_keys",
]
