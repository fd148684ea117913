"""Command line access to the Jira avatar endpoints."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

import httpx

from jira_avatars.config import get_settings
from jira_avatars.errors import JiraRequestError
from jira_avatars.models.schemas import AvatarCrop
from jira_avatars.services.avatar import AvatarClient
from jira_avatars.services.jira_client import JiraClient


def _print_json(obj: object) -> None:
    """Print JSON to stdout."""
    print(json.dumps(obj, indent=2, sort_keys=True, default=str))


async def _run(args: argparse.Namespace) -> Any:
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    async with JiraClient.from_settings(get_settings(), **overrides) as jira:
        avatars = AvatarClient(jira)
        if args.command == "list":
            return await avatars.get_avatars({"avatar_type": args.avatar_type})
        if args.command == "upload":
            return await avatars.create_temporary_avatar(
                {"avatar_type": args.avatar_type, "avatar_file_path": args.file}
            )
        crop = AvatarCrop(
            cropper_width=args.width,
            cropper_offset_x=args.offset_x,
            cropper_offset_y=args.offset_y,
            needs_cropping=args.needs_cropping,
        )
        return await avatars.crop_temporary_avatar({"avatar_type": args.avatar_type, "crop": crop})


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jira-avatars", description="Jira avatar REST helper")
    p.add_argument("--host", default=None, help="Jira host (defaults to JIRA_HOST)")
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List system avatars")
    ls.add_argument("avatar_type", choices=["project", "user"])

    up = sub.add_parser("upload", help="Upload a temporary avatar")
    up.add_argument("avatar_type", choices=["project", "user"])
    up.add_argument("file", help="Image file to upload")

    cr = sub.add_parser("crop", help="Crop the temporary avatar")
    cr.add_argument("avatar_type", choices=["project", "user"])
    cr.add_argument("--width", type=int, required=True)
    cr.add_argument("--offset-x", type=int, default=0)
    cr.add_argument("--offset-y", type=int, default=0)
    cr.add_argument("--needs-cropping", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_settings().log_level.upper())
    try:
        result = asyncio.run(_run(args))
    except (ValueError, RuntimeError, OSError, httpx.RequestError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except JiraRequestError as e:
        body = e.body if isinstance(e.body, str) else json.dumps(e.body, default=str)
        print(body, file=sys.stderr)
        return 2
    _print_json(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
