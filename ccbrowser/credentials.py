"""Anthropic API key discovery.

Lookup order, first hit wins:

1. the ``ANTHROPIC_API_KEY`` environment variable (no secret store touched)
2. the Claude Code entry in the OS secret store (keychain, Windows
   Credential Manager, or credentials files / libsecret on Linux)

A key is never cached here; every call looks it up again.
"""
from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum

from ccbrowser.config import Config
from ccbrowser.probe import PlatformProbe, detect_probe

log = logging.getLogger(__name__)


class CredentialOrigin(Enum):
    ENVIRONMENT = "env"
    OS_SECRET_STORE = "claude-code"


@dataclass(frozen=True)
class Credential:
    value: str
    origin: CredentialOrigin

    def __repr__(self) -> str:
        # Keep the key itself out of logs and tracebacks.
        return f"Credential(value=<{len(self.value)} chars>, origin={self.origin.name})"


def lookup_secret_store(
    config: Config | None = None, probe: PlatformProbe | None = None
) -> str | None:
    """Query the OS secret store for the Claude Code API key.

    Returns None when nothing prefix-valid is stored; never raises.
    """
    cfg = config or Config()
    probe = probe or detect_probe()
    return probe.lookup_secret(cfg.secret_service, cfg.key_prefix)


def resolve(
    config: Config | None = None, probe: PlatformProbe | None = None
) -> Credential | None:
    """Return the API key and where it came from, or None."""
    cfg = config or Config()

    env_value = os.environ.get(cfg.credential_env, "")
    if env_value:
        log.debug("API key taken from $%s", cfg.credential_env)
        return Credential(env_value, CredentialOrigin.ENVIRONMENT)

    value = lookup_secret_store(cfg, probe)
    if value is None:
        log.debug("No API key found in environment or secret store")
        return None
    log.debug("API key taken from the OS secret store")
    return Credential(value, CredentialOrigin.OS_SECRET_STORE)


async def async_resolve(
    config: Config | None = None, probe: PlatformProbe | None = None
) -> Credential | None:
    """Non-blocking wrapper: run resolve() in a thread executor.

    Secret-store queries spawn subprocesses; this keeps them off the event
    loop. No timeout is applied.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, resolve, config, probe)
