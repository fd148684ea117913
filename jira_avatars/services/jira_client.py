"""Shared Jira REST client: URL building and the HTTP transport."""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import httpx

from ..config import Settings
from .request_options import RequestOptions

logger = logging.getLogger(__name__)


class JiraClient:
    """Builds REST URLs for one Jira instance and performs requests against it.

    Every API facade in the package shares one instance. The client owns an
    ``httpx.AsyncClient`` unless one is injected, in which case closing it stays the
    caller's job.
    """

    def __init__(
        self,
        *,
        host: str,
        protocol: str = "https",
        port: Optional[int] = None,
        path_prefix: str = "",
        api_version: str | int = 2,
        username: Optional[str] = None,
        password: Optional[str] = None,
        bearer_token: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        host = (host or "").strip()
        if not host:
            raise RuntimeError("JIRA_HOST missing; set the hostname of your Jira instance")
        self.host = host
        self.protocol = protocol
        self.port = port
        self.path_prefix = path_prefix.rstrip("/")
        if self.path_prefix and not self.path_prefix.startswith("/"):
            self.path_prefix = "/" + self.path_prefix
        self.api_version = str(api_version)
        self._auth: Optional[httpx.Auth] = None
        self._auth_headers: dict[str, str] = {}
        if bearer_token:
            self._auth_headers["Authorization"] = f"Bearer {bearer_token}"
        elif username:
            self._auth = httpx.BasicAuth(username, password or "")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "JiraClient":
        """Create a client from environment-driven settings."""

        kwargs: dict[str, Any] = {
            "host": settings.jira_host or "",
            "protocol": settings.jira_protocol,
            "port": settings.jira_port,
            "path_prefix": settings.jira_path_prefix,
            "api_version": settings.jira_api_version,
            "username": settings.jira_username,
            "password": settings.jira_password,
            "bearer_token": settings.jira_bearer_token,
            "timeout": settings.jira_timeout,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    def build_url(self, path: str) -> str:
        """Return the absolute REST URL for an API path such as ``/avatar/user/system``."""

        authority = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{self.protocol}://{authority}{self.path_prefix}/rest/api/{self.api_version}{path}"

    async def make_request(self, options: RequestOptions) -> Tuple[httpx.Response, Any]:
        """Perform the request described by ``options``.

        Returns the response together with its decoded body. Transport, redirect
        and decoding failures surface as ``httpx.RequestError`` subclasses.
        """

        request_kwargs: dict[str, Any] = {
            "params": options.qs,
            "headers": {**self._auth_headers, **options.headers},
            "follow_redirects": options.follow_all_redirects,
        }
        if self._auth is not None:
            request_kwargs["auth"] = self._auth
        if options.form_data is not None:
            request_kwargs["files"] = options.form_data
        elif options.body is not None:
            if options.json:
                request_kwargs["json"] = options.body
            else:
                request_kwargs["content"] = options.body
        if options.json:
            request_kwargs["headers"].setdefault("Accept", "application/json")

        logger.info("Jira request %s %s", options.method, options.uri)
        response = await self._http.request(options.method, options.uri, **request_kwargs)
        logger.debug("Jira response %s for %s %s", response.status_code, options.method, options.uri)
        return response, _decode_body(response, options.json)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _decode_body(response: httpx.Response, as_json: bool) -> Any:
    """Decode a response payload the way the descriptor asked for it."""

    if not response.content:
        return None
    if as_json:
        try:
            return response.json()
        except ValueError:
            # HTML error pages, possibly not UTF-8
            pass
    return response.text
