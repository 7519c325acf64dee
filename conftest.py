"""
Repository-level pytest configuration.

Sets demo-safe environment defaults so a fresh clone runs without secrets.
Values below are placeholders; real projects should load credentials from
a secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Provide credentials if not already set by the user or CI."""
    defaults = {
        "WEB_USER_NAME": "demo_user",
        "WEB_USER_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
