"""Per-OS knowledge of where Chrome and the Claude Code secret live.

Each PlatformProbe variant supplies three things for its OS:

* ``browser_candidates()`` ordered executable paths, most preferred first
* ``user_data_dir()`` the real Chrome profile root (the data dir, not the binary)
* ``lookup_secret()`` a secret-store query for the API key

Every lookup step returns the value or None. Command failures, missing
files and unparseable content all map to None at the step that hit them;
nothing here raises for an absent secret.

detect_probe() picks the variant once from platform.system().
"""
from __future__ import annotations

import functools
import json
import logging
import ntpath
import os
import platform
import posixpath
import subprocess
from pathlib import Path, PurePath, PureWindowsPath

log = logging.getLogger(__name__)


def has_prefix(value: object, prefix: str) -> bool:
    """True only for a non-empty string starting with *prefix*."""
    return isinstance(value, str) and bool(value) and value.startswith(prefix)


def _env(var: str) -> str:
    return os.environ.get(var, "")


def run_query(cmd: list[str]) -> str | None:
    """Run a secret-store query and return its trimmed stdout, or None.

    Non-zero exit, a missing binary and empty output are all "not found".
    """
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except (OSError, subprocess.SubprocessError) as exc:
        log.debug("%s unavailable: %s", cmd[0], exc)
        return None
    if proc.returncode != 0:
        log.debug("%s exited with %d", cmd[0], proc.returncode)
        return None
    return proc.stdout.strip() or None


def read_credential_file(path: str, prefix: str) -> str | None:
    """Extract an API key from a credentials file.

    Accepts either a bare key or a JSON object with an ``apiKey`` field.
    """
    if not os.path.isfile(path):
        return None
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read().strip()
    except (OSError, ValueError) as exc:
        log.debug("Cannot read %s: %s", path, exc)
        return None

    if has_prefix(content, prefix):
        return content
    try:
        parsed = json.loads(content)
    except (ValueError, RecursionError):
        return None
    if isinstance(parsed, dict) and has_prefix(parsed.get("apiKey"), prefix):
        return parsed["apiKey"]
    return None


class PlatformProbe:
    """Base class; see the module docstring for the contract."""

    name = "unknown"

    def browser_candidates(self) -> list[str]:
        raise NotImplementedError

    def user_data_dir(self) -> PurePath | None:
        raise NotImplementedError

    def lookup_secret(self, service: str, prefix: str) -> str | None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class DarwinProbe(PlatformProbe):
    name = "darwin"

    _APP_BINARIES = (
        "Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "Applications/Chromium.app/Contents/MacOS/Chromium",
    )

    def browser_candidates(self) -> list[str]:
        candidates = ["/" + app for app in self._APP_BINARIES]
        home = _env("HOME")
        if home:
            candidates.extend(posixpath.join(home, app) for app in self._APP_BINARIES)
        return candidates

    def user_data_dir(self) -> Path | None:
        home = _env("HOME")
        if not home:
            return None
        return Path(home) / "Library" / "Application Support" / "Google" / "Chrome"

    def lookup_secret(self, service: str, prefix: str) -> str | None:
        value = run_query(["security", "find-generic-password", "-s", service, "-w"])
        return value if has_prefix(value, prefix) else None


class WindowsProbe(PlatformProbe):
    name = "windows"

    _CHROME = ("Google", "Chrome", "Application", "chrome.exe")
    _CHROMIUM = ("Chromium", "Application", "chrome.exe")

    def browser_candidates(self) -> list[str]:
        candidates = [
            ntpath.join("C:\\Program Files", *self._CHROME),
            ntpath.join("C:\\Program Files (x86)", *self._CHROME),
        ]
        for var in ("LOCALAPPDATA", "PROGRAMFILES", "PROGRAMFILES(X86)"):
            base = _env(var)
            if base:
                candidates.append(ntpath.join(base, *self._CHROME))
        candidates += [
            ntpath.join("C:\\Program Files", *self._CHROMIUM),
            ntpath.join("C:\\Program Files (x86)", *self._CHROMIUM),
        ]
        return candidates

    def user_data_dir(self) -> PureWindowsPath | None:
        local = _env("LOCALAPPDATA")
        if not local:
            return None
        return PureWindowsPath(local, "Google", "Chrome", "User Data")

    def lookup_secret(self, service: str, prefix: str) -> str | None:
        # Get-StoredCredential comes from the CredentialManager module; when
        # the module is missing powershell exits non-zero, which is "not found".
        target = service.replace("'", "''")
        script = (
            f"$cred = Get-StoredCredential -Target '{target}' -ErrorAction SilentlyContinue; "
            "if ($cred) { $cred.GetNetworkCredential().Password }"
        )
        value = run_query(["powershell", "-NoProfile", "-Command", script])
        return value if has_prefix(value, prefix) else None


class UnixProbe(PlatformProbe):
    name = "unix"

    BROWSER_PATHS = (
        "/usr/bin/google-chrome",
        "/usr/bin/google-chrome-stable",
        "/usr/bin/chromium",
        "/usr/bin/chromium-browser",
        "/snap/bin/chromium",
        "/usr/local/bin/google-chrome",
        "/usr/local/bin/chromium",
        "/opt/google/chrome/chrome",
        "/opt/google/chrome/google-chrome",
    )

    def browser_candidates(self) -> list[str]:
        return list(self.BROWSER_PATHS)

    def user_data_dir(self) -> Path | None:
        home = _env("HOME")
        if not home:
            return None
        return Path(home) / ".config" / "google-chrome"

    def credential_files(self) -> list[str]:
        """Known credential file locations, in lookup order."""
        home = _env("HOME")
        paths = []
        if home:
            paths.append(posixpath.join(home, ".claude", "credentials"))
            paths.append(posixpath.join(home, ".config", "claude-code", "credentials"))
        config_home = _env("XDG_CONFIG_HOME") or (
            posixpath.join(home, ".config") if home else ""
        )
        if config_home:
            paths.append(posixpath.join(config_home, "claude-code", "credentials"))
        return paths

    def lookup_secret(self, service: str, prefix: str) -> str | None:
        for path in self.credential_files():
            value = read_credential_file(path, prefix)
            if value is not None:
                log.debug("API key found in %s", path)
                return value
        value = run_query(["secret-tool", "lookup", "service", service])
        return value if has_prefix(value, prefix) else None


_PROBES: dict[str, type[PlatformProbe]] = {
    "Darwin": DarwinProbe,
    "Windows": WindowsProbe,
}


def probe_for(system: str) -> PlatformProbe:
    """Return the probe for a platform.system() name; anything else is Unix."""
    return _PROBES.get(system, UnixProbe)()


@functools.lru_cache(maxsize=None)
def detect_probe() -> PlatformProbe:
    probe = probe_for(platform.system())
    log.debug("Using %r", probe)
    return probe
