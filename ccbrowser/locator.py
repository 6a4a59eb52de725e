"""Chrome / Chromium executable discovery."""
from __future__ import annotations

import logging
import os

from ccbrowser.probe import PlatformProbe, detect_probe

log = logging.getLogger(__name__)


def find_browser(probe: PlatformProbe | None = None) -> str | None:
    """Find a local Chrome or Chromium binary.

    Returns the first existing candidate for this OS, or None if none is
    installed (the caller may then ask the user for a path).
    """
    probe = probe or detect_probe()
    for candidate in probe.browser_candidates():
        if candidate and os.path.exists(candidate):
            log.info("Found browser: %s", candidate)
            return candidate
    log.info("No Chrome or Chromium installation found")
    return None
