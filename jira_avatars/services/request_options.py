"""Transient HTTP request descriptor built per Jira call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, Optional, Tuple, Union

FormValue = Union[BinaryIO, Tuple[str, BinaryIO], Tuple[str, BinaryIO, str]]


@dataclass
class RequestOptions:
    """Everything the shared client needs to perform one request."""

    method: str
    uri: str
    json: bool = True
    follow_all_redirects: bool = True
    headers: Dict[str, str] = field(default_factory=dict)
    qs: Optional[Dict[str, Any]] = None
    body: Any = None
    form_data: Optional[Dict[str, FormValue]] = None
