"""Test helpers for ccbrowser."""
from __future__ import annotations

import subprocess


def completed(returncode: int, stdout: str = "") -> subprocess.CompletedProcess:
    """A finished secret-store query as subprocess.run would return it."""
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=""
    )
