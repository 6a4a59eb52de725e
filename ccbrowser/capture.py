"""Screenshot capture over CDP with a 2000x2000 size bound.

Usage by the automation layer, with a Playwright (async API) page that is
already open in the attached browser:

    from ccbrowser.capture import take_screenshot

    path = await take_screenshot(page, plugin_root)

Screenshots land in ``<root>/agent/browser_screenshots`` and are never
cleaned up here. Errors from CDP, image decoding or the write propagate;
there is no retry.
"""
from __future__ import annotations

import asyncio
import base64
import io
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from PIL import Image
from playwright.async_api import Page

from ccbrowser.paths import screenshot_path

log = logging.getLogger(__name__)

MAX_DIMENSION = 2000

CAPTURE_PARAMS = {"format": "png", "quality": 100, "fromSurface": False}


@dataclass(frozen=True)
class Capture:
    path: str
    width: int
    height: int


def fit_within(data: bytes, limit: int = MAX_DIMENSION) -> tuple[bytes, int, int]:
    """Shrink a PNG so neither side exceeds *limit*.

    Returns ``(png_bytes, width, height)``. Images already within bounds
    come back byte-for-byte unchanged; larger ones are scaled down with
    their aspect ratio kept and re-encoded as PNG. Never upscales.
    """
    with Image.open(io.BytesIO(data)) as img:
        width, height = img.size
        if width <= limit and height <= limit:
            return data, width, height
        img.thumbnail((limit, limit), Image.LANCZOS)
        out = io.BytesIO()
        img.save(out, "PNG")
        log.debug("Downscaled screenshot %dx%d -> %dx%d", width, height, *img.size)
        return out.getvalue(), img.size[0], img.size[1]


async def _capture_png(page: Page) -> bytes:
    """Take a screenshot via a CDP session bound to *page*."""
    cdp = await page.context.new_cdp_session(page)
    try:
        result = await cdp.send("Page.captureScreenshot", CAPTURE_PARAMS)
    finally:
        await cdp.detach()
    return base64.b64decode(result["data"])


async def capture(
    page: Page, root: str | Path, now: datetime | None = None
) -> Capture:
    """Capture *page* to a timestamped PNG under *root*."""
    path = screenshot_path(root, now)
    path.parent.mkdir(parents=True, exist_ok=True)

    raw = await _capture_png(page)
    loop = asyncio.get_running_loop()
    data, width, height = await loop.run_in_executor(None, fit_within, raw)

    with open(path, "wb") as fh:
        fh.write(data)
    log.info("Screenshot: %s (%dx%d, %d bytes)", path, width, height, len(data))
    return Capture(str(path), width, height)


async def take_screenshot(page: Page, root: str | Path) -> str:
    """Capture *page* and return the screenshot file path."""
    return (await capture(page, root)).path
