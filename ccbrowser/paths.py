"""Fixed workspace layout under a caller-supplied root.

Everything ccbrowser writes lives under the plugin/installation root:

    <root>/.chrome-profile/Default/**                      copied profile
    <root>/agent/browser_screenshots/screenshot-*.png       captures

None of these locations is configurable.
"""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

PROFILE_DIRNAME = ".chrome-profile"
STAGING_SUFFIX = ".partial"
DEFAULT_PROFILE = "Default"
SCREENSHOT_SUBDIR = Path("agent") / "browser_screenshots"


def profile_dir(root: str | Path) -> Path:
    return Path(root) / PROFILE_DIRNAME


def staging_dir(root: str | Path) -> Path:
    """Scratch location used by the atomic profile copy."""
    return Path(root) / f"{PROFILE_DIRNAME}{STAGING_SUFFIX}"


def screenshot_dir(root: str | Path) -> Path:
    return Path(root) / SCREENSHOT_SUBDIR


def file_timestamp(now: datetime | None = None) -> str:
    """UTC ISO-8601 timestamp that is safe in a filename on every OS.

    ``2026-10-18T09:05:03.042Z`` becomes ``2026-10-18T09-05-03-042Z``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def screenshot_path(root: str | Path, now: datetime | None = None) -> Path:
    return screenshot_dir(root) / f"screenshot-{file_timestamp(now)}.png"
