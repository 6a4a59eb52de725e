"""Load and provide ccbrowser configuration from ccbrowser.toml."""
from __future__ import annotations

import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]
from pathlib import Path

CONFIG_FILENAME = "ccbrowser.toml"


@dataclass
class Config:
    credential_env: str = "ANTHROPIC_API_KEY"
    secret_service: str = "Claude Code"  # keychain / credential-manager entry name
    key_prefix: str = "sk-ant-"
    atomic_profile_copy: bool = False  # stage profile copy and rename into place


def load(root: Path | None = None) -> Config:
    """Load config from ccbrowser.toml; all fields have defaults."""
    if root is None:
        root = Path.cwd()

    toml_path = Path(root) / CONFIG_FILENAME
    data: dict = {}
    if toml_path.exists():
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)

    credentials = data.get("credentials", {})
    profile = data.get("profile", {})

    return Config(
        credential_env=credentials.get("env_var", "ANTHROPIC_API_KEY"),
        secret_service=credentials.get("service", "Claude Code"),
        key_prefix=credentials.get("prefix", "sk-ant-"),
        atomic_profile_copy=bool(profile.get("atomic_copy", False)),
    )
