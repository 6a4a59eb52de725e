"""Unit tests for ccbrowser.paths."""
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ccbrowser.paths import (
    file_timestamp,
    profile_dir,
    screenshot_dir,
    screenshot_path,
    staging_dir,
)


def test_fixed_layout(tmp_path):
    assert profile_dir(tmp_path) == tmp_path / ".chrome-profile"
    assert staging_dir(tmp_path) == tmp_path / ".chrome-profile.partial"
    assert screenshot_dir(tmp_path) == tmp_path / "agent" / "browser_screenshots"


def test_accepts_str_root():
    assert profile_dir("/srv/plugin") == Path("/srv/plugin/.chrome-profile")


def test_timestamp_has_no_colons_or_dots():
    stamp = file_timestamp(datetime(2026, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc))
    assert stamp == "2026-01-02T03-04-05-006Z"
    assert ":" not in file_timestamp() and "." not in file_timestamp()


def test_timestamp_normalized_to_utc():
    plus_two = timezone(timedelta(hours=2))
    stamp = file_timestamp(datetime(2026, 1, 2, 5, 0, 0, tzinfo=plus_two))
    assert stamp == "2026-01-02T03-00-00-000Z"


def test_screenshot_path(tmp_path):
    now = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)
    assert screenshot_path(tmp_path, now) == (
        tmp_path / "agent" / "browser_screenshots"
        / "screenshot-2026-10-18T12-00-00-000Z.png"
    )
