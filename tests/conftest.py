"""Shared test fixtures for ccbrowser.

Nothing here touches a real browser, keychain or the user's home:
  isolated_env  HOME points at tmp_path, credential/XDG variables cleared
  fake_run      subprocess.run patched for secret-store queries
  fake_page     factory for a Playwright page whose CDP session returns a PNG
  make_png      factory for PNG bytes of a given size
"""
from __future__ import annotations

import base64
import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from PIL import Image

from tests.helpers import completed


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Fresh HOME with no API key or XDG override in the environment."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("ANTHROPIC_API_KEY", "XDG_CONFIG_HOME", "LOCALAPPDATA",
                "PROGRAMFILES", "PROGRAMFILES(X86)"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def fake_run():
    """Patch subprocess.run as seen by the probes; defaults to "not found"."""
    with patch("ccbrowser.probe.subprocess.run") as run:
        run.return_value = completed(1)
        yield run


@pytest.fixture
def make_png():
    def _make(width: int, height: int, color: str = "steelblue") -> bytes:
        buf = io.BytesIO()
        Image.new("RGB", (width, height), color).save(buf, "PNG")
        return buf.getvalue()
    return _make


@pytest.fixture
def fake_page():
    """Return ``(page, cdp)`` where cdp.send answers with the given PNG."""
    def _make(png: bytes):
        cdp = MagicMock()
        cdp.send = AsyncMock(
            return_value={"data": base64.b64encode(png).decode("ascii")}
        )
        cdp.detach = AsyncMock()
        page = MagicMock()
        page.context.new_cdp_session = AsyncMock(return_value=cdp)
        return page, cdp
    return _make
