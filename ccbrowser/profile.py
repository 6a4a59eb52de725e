"""One-time copy of the user's real Chrome profile into the plugin root.

Automation runs against ``<root>/.chrome-profile`` so it inherits the
user's logged-in sessions without touching (or locking) the live profile.
The copy happens once: if the workspace directory exists it is considered
ready, even if the source profile has changed since. Delete the directory
to force a fresh copy.

By default the copy is written in place, so an interrupted first run leaves
a partial workspace that later calls treat as ready. With ``atomic_copy``
enabled the copy is staged in ``.chrome-profile.partial`` and renamed into
place only once complete.

Copy failures (permissions, disk full) propagate to the caller.
"""
from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path

from ccbrowser.config import Config
from ccbrowser.paths import DEFAULT_PROFILE, profile_dir, staging_dir
from ccbrowser.probe import PlatformProbe, detect_probe

log = logging.getLogger(__name__)

_DIM = "\x1b[2m"
_RESET = "\x1b[0m"


class ProvisionState(Enum):
    UNPROVISIONED = "unprovisioned"
    PROVISIONING = "provisioning"
    READY = "ready"


def _notice(text: str, end: str = "\n") -> None:
    log.info(text)
    print(f"{_DIM}{text}{_RESET}", end=end)


def chrome_user_data_dir(probe: PlatformProbe | None = None) -> Path | None:
    """Chrome's user data directory for this OS, or None if undeterminable."""
    probe = probe or detect_probe()
    data_dir = probe.user_data_dir()
    return Path(data_dir) if data_dir is not None else None


def profile_state(root: str | Path) -> ProvisionState:
    """Where *root*'s workspace stands.

    PROVISIONING means an atomic copy's staging directory exists. That is
    also the case after a crashed atomic copy left it behind; the next
    prepare_profile() call with atomic_copy discards it and starts over.
    """
    if profile_dir(root).exists():
        return ProvisionState.READY
    if staging_dir(root).exists():
        return ProvisionState.PROVISIONING
    return ProvisionState.UNPROVISIONED


def _copy_default_profile(source_root: Path | None, dest: Path) -> bool:
    """Copy ``<source_root>/Default`` into *dest*. Returns False if absent."""
    if source_root is None:
        return False
    source = source_root / DEFAULT_PROFILE
    if not source.is_dir():
        return False
    shutil.copytree(source, dest / DEFAULT_PROFILE, symlinks=True)
    return True


def prepare_profile(
    root: str | Path,
    config: Config | None = None,
    probe: PlatformProbe | None = None,
) -> Path:
    """Make sure ``<root>/.chrome-profile`` exists; copy the profile on first run.

    Returns the workspace directory. A no-op when it already exists.
    Call this before launching the browser; a large profile can take a
    minute to copy.
    """
    cfg = config or Config()
    dest = profile_dir(root)
    if dest.exists():
        return dest

    _notice(f"Copying Chrome profile to {dest.name}/ (this may take a minute)...")
    source_root = chrome_user_data_dir(probe)

    if cfg.atomic_profile_copy:
        staging = staging_dir(root)
        if staging.exists():
            log.warning("Discarding incomplete profile copy at %s", staging)
            shutil.rmtree(staging)
        staging.mkdir(parents=True)
        copied = _copy_default_profile(source_root, staging)
        staging.rename(dest)
    else:
        dest.mkdir(parents=True, exist_ok=True)
        copied = _copy_default_profile(source_root, dest)

    if copied:
        _notice("✓ Profile copied successfully", end="\n\n")
    else:
        _notice("No existing profile found, using fresh profile", end="\n\n")
    return dest
