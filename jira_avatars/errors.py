"""Error strings and exceptions raised by the avatar client."""
from __future__ import annotations

from typing import Any, Optional

NO_AVATAR_TYPE_ERROR = "Error: avatarType must be specified"
NO_AVATAR_FILE_PATH_ERROR = "Error: avatarFilePath must be specified"


class JiraRequestError(Exception):
    """Raised when Jira answers with a status code outside the 2xx range.

    The response body is kept verbatim on ``body``; Jira usually sends a JSON
    document with ``errorMessages`` and ``errors`` keys, but proxies in front of it
    may return plain text or nothing at all.
    """

    def __init__(self, body: Any, status_code: Optional[int] = None):
        self.body = body
        self.status_code = status_code
        super().__init__(f"Jira request failed with status {status_code}: {body!r}")
