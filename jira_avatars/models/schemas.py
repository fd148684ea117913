"""Pydantic models describing Jira avatar payloads."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AvatarCrop(BaseModel):
    """Cropping instructions for a temporary avatar."""

    model_config = ConfigDict(populate_by_name=True)

    cropper_width: Optional[int] = Field(default=None, alias="cropperWidth")
    cropper_offset_x: Optional[int] = Field(default=None, alias="cropperOffsetX")
    cropper_offset_y: Optional[int] = Field(default=None, alias="cropperOffsetY")
    needs_cropping: Optional[bool] = Field(default=None, alias="needsCropping")


class TemporaryAvatar(AvatarCrop):
    """Response returned after uploading a temporary avatar."""

    url: Optional[str] = None


class Avatar(BaseModel):
    """A single avatar descriptor."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Union[int, str]
    owner: Optional[str] = None
    is_system_avatar: bool = Field(default=False, alias="isSystemAvatar")
    is_selected: bool = Field(default=False, alias="isSelected")
    is_deletable: bool = Field(default=False, alias="isDeletable")
    selected: bool = False
    urls: Dict[str, str] = Field(default_factory=dict)


class SystemAvatars(BaseModel):
    system: List[Avatar] = Field(default_factory=list)


def parse_system_avatars(body: Any) -> SystemAvatars:
    """Interpret a ``get_avatars`` body.

    Jira wraps the list in a ``{"system": [...]}`` envelope; a bare list is accepted too.
    """

    if isinstance(body, list):
        body = {"system": body}
    return SystemAvatars.model_validate(body)
