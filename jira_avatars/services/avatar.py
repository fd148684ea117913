"""Access to the Jira REST endpoints under ``/rest/api/2/avatar``."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Awaitable, Mapping, Optional

from pydantic import BaseModel

from ..errors import NO_AVATAR_FILE_PATH_ERROR, NO_AVATAR_TYPE_ERROR, JiraRequestError
from .jira_client import JiraClient
from .request_options import RequestOptions

logger = logging.getLogger(__name__)

# Tells Jira to skip its XSRF token check for this request.
_NO_CHECK_HEADERS = {"X-Atlassian-Token": "no-check"}


def _option(opts: Mapping[str, Any], snake: str, camel: str) -> Any:
    value = opts.get(snake)
    return value if value is not None else opts.get(camel)


def _require_avatar_type(opts: Mapping[str, Any]) -> str:
    avatar_type = _option(opts, "avatar_type", "avatarType")
    if not avatar_type:
        raise ValueError(NO_AVATAR_TYPE_ERROR)
    return str(avatar_type)


class AvatarClient:
    """Facade over the avatar endpoints, sharing a ``JiraClient`` for transport.

    The operations validate their options when called and return an awaitable for
    the request, so bad options raise before anything is scheduled.
    """

    def __init__(self, jira_client: JiraClient):
        self.jira_client = jira_client

    def get_avatars(self, opts: Mapping[str, Any]) -> Awaitable[Any]:
        """Return all system avatars of the given type.

        ``opts["avatar_type"]`` may be ``"project"`` or ``"user"``.
        """

        avatar_type = _require_avatar_type(opts)
        options = RequestOptions(
            method="GET",
            uri=self.jira_client.build_url(f"/avatar/{avatar_type}/system"),
        )
        return self.make_request(options)

    def create_temporary_avatar(self, opts: Mapping[str, Any]) -> Awaitable[Any]:
        """Upload an image as a temporary avatar.

        Jira does not honour its documented contract for this endpoint, so callers
        should not rely on it.

        Options:
          avatar_type: ``"project"`` or ``"user"``
          avatar_file_path: path of the image to upload; its size and base name are
            sent as the ``size`` and ``filename`` query parameters
        """

        avatar_type = _require_avatar_type(opts)
        file_path = _option(opts, "avatar_file_path", "avatarFilePath")
        if not file_path:
            raise ValueError(NO_AVATAR_FILE_PATH_ERROR)
        size = os.stat(file_path).st_size
        name = Path(file_path).name
        options = RequestOptions(
            method="POST",
            uri=self.jira_client.build_url(f"/avatar/{avatar_type}/temporary"),
            headers=dict(_NO_CHECK_HEADERS),
            qs={"filename": name, "size": size},
        )
        return self._upload(options, file_path, name)

    def crop_temporary_avatar(self, opts: Mapping[str, Any]) -> Awaitable[Any]:
        """Update the cropping instructions of the temporary avatar.

        Like ``create_temporary_avatar`` this endpoint is unreliable upstream.
        ``opts["crop"]`` is sent verbatim as the JSON body; an ``AvatarCrop`` model is
        serialised with Jira's field names.
        """

        avatar_type = _require_avatar_type(opts)
        crop = opts.get("crop")
        if isinstance(crop, BaseModel):
            crop = crop.model_dump(by_alias=True, exclude_none=True)
        options = RequestOptions(
            method="POST",
            uri=self.jira_client.build_url(f"/avatar/{avatar_type}/temporaryCrop"),
            headers=dict(_NO_CHECK_HEADERS),
            body=crop,
        )
        return self.make_request(options)

    async def _upload(self, options: RequestOptions, file_path: str, name: str) -> Any:
        with open(file_path, "rb") as handle:
            options.form_data = {"file": (name, handle)}
            return await self.make_request(options)

    async def make_request(self, options: RequestOptions, success_string: Optional[str] = None) -> Any:
        """Run ``options`` through the shared client and normalise the outcome.

        Returns ``success_string`` when supplied, otherwise the response body. A
        status code whose first digit is not 2 raises ``JiraRequestError`` carrying
        the body; transport errors propagate unchanged.
        """

        response, body = await self.jira_client.make_request(options)
        if not str(response.status_code).startswith("2"):
            logger.warning(
                "Jira %s %s failed with status %s", options.method, options.uri, response.status_code
            )
            raise JiraRequestError(body, status_code=response.status_code)
        return success_string if success_string else body
