"""Async helpers for the Jira REST avatar endpoints.

Importing the package reads ``JIRA_*`` connection settings from a ``.env`` file at
the project root, with ``.env.local`` taking precedence over it.
"""
from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


_PROJECT_DIR = Path(__file__).resolve().parent.parent

load_dotenv(_PROJECT_DIR / ".env")
load_dotenv(_PROJECT_DIR / ".env.local", override=True)
