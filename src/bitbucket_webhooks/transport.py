"""HTTP transport built on requests.

Anything with a ``request(verb, path, params)`` method can stand in for
HttpTransport; the pipeline only relies on that one call.
"""

from typing import Any, Protocol

import requests
from loguru import logger

from .errors import TransportError

DEFAULT_BASE_URL = "https://api.bitbucket.org"
BODY_VERBS = ("POST", "PUT", "PATCH")


class Transport(Protocol):
    def request(self, verb: str, path: str, params: dict) -> Any:
        ...


class HttpTransport:
    """Sends requests to the Bitbucket API and decodes JSON responses."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        username: str | None = None,
        app_password: str | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/json"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        elif username and app_password:
            self.session.auth = (username, app_password)

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, verb: str, path: str, params: dict | None = None) -> Any:
        """Issue one request. Raises TransportError on failure or non-2xx status."""
        verb = verb.upper()
        url = self.url_for(path)
        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if verb in BODY_VERBS:
            kwargs["json"] = params or {}
        elif params:
            kwargs["params"] = params

        try:
            response = self.session.request(verb, url, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{verb} {url} failed: {e}")
            raise TransportError(f"{verb} {url} failed: {e}") from e

        logger.debug(f"{verb} {url} -> {response.status_code}")
        body = self._decode(response)
        if not response.ok:
            logger.warning(f"{verb} {url} returned HTTP {response.status_code}")
            raise TransportError(
                f"{verb} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        return body

    def _decode(self, response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
