"""
Profile loader.

Loads validation profiles from YAML files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from .models import ZenginProfile

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Raised when a profile file cannot be loaded."""


def load_profile(path: Path) -> ZenginProfile:
    """
    Load a profile from a YAML file.

    YAML format:
    ```yaml
    profile:
      id: my-bank
      label: "Zengin transfer (bank 0005)"
      originator_bank_code: "0005"
      deposit_types: ["1", "2"]
    ```

    Keys that are left out keep their defaults. Codes must be quoted so YAML
    keeps their leading zeros.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or describes an
            invalid profile
    """
    if not path.exists():
        raise ConfigError(f"Profile file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Profile file {path} must contain a mapping")

    profile_data = data.get("profile", {})
    if not isinstance(profile_data, dict):
        raise ConfigError(f"'profile' in {path} must be a mapping")

    try:
        return ZenginProfile.model_validate(profile_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid profile in {path}: {e}") from e
