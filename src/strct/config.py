"""YAML configuration loader for the strct command line."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from strct.text.spoonerize import SWAP_LENGTHS

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when strct.yaml is invalid."""


@dataclass
class DistributeConfig:
    """Split defaults (``distribute:`` section in strct.yaml)."""

    keep_trailing: bool = True


@dataclass
class SpoonerizeConfig:
    """Swap lengths used when the CLI is not given any (``spoonerize:`` section)."""

    first_len: int = 1
    second_len: int = 1


@dataclass
class StrctConfig:
    log_level: str = "WARNING"
    log_file: str | None = None
    distribute: DistributeConfig = field(default_factory=DistributeConfig)
    spoonerize: SpoonerizeConfig = field(default_factory=SpoonerizeConfig)
    source_path: str | None = None

    def validate(self) -> list[str]:
        """Validate config, returning a list of error messages (empty = valid)."""
        errors: list[str] = []

        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{self.log_level}'"
            )

        if self.log_file:
            log_parent = Path(self.log_file).expanduser().parent
            if not log_parent.exists():
                errors.append(f"Log file parent directory does not exist: {log_parent}")

        if self.spoonerize.first_len not in SWAP_LENGTHS:
            errors.append(f"spoonerize.first_len must be 1 or 2, got {self.spoonerize.first_len}")
        if self.spoonerize.second_len not in SWAP_LENGTHS:
            errors.append(
                f"spoonerize.second_len must be 1 or 2, got {self.spoonerize.second_len}"
            )

        return errors

    def apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        if val := os.environ.get("STRCT_LOG_LEVEL"):
            self.log_level = val
        if val := os.environ.get("STRCT_LOG_FILE"):
            self.log_file = val


def load_config(path: str | None = None) -> StrctConfig:
    """Load config from explicit path, strct.yaml in CWD, or ~/.config/strct/config.yaml."""
    candidates = []
    if path:
        candidates.append(Path(path))
    else:
        candidates.append(Path.cwd() / "strct.yaml")
        candidates.append(Path.home() / ".config" / "strct" / "config.yaml")

    for candidate in candidates:
        if candidate.exists():
            cfg = _parse_config(candidate)
            break
    else:
        if path:
            raise ConfigError(f"Config file not found: {path}")
        cfg = StrctConfig()

    cfg.apply_env_overrides()
    return cfg


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def _parse_config(path: Path) -> StrctConfig:
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    distribute_data = _section(data, "distribute")
    distribute = DistributeConfig(
        keep_trailing=bool(distribute_data.get("keep_trailing", True)),
    )

    spoon_data = _section(data, "spoonerize")
    try:
        spoonerize = SpoonerizeConfig(
            first_len=int(spoon_data.get("first_len", 1)),
            second_len=int(spoon_data.get("second_len", 1)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"spoonerize lengths must be integers: {exc}") from exc

    return StrctConfig(
        log_level=str(data.get("log_level", "WARNING")),
        log_file=data.get("log_file"),
        distribute=distribute,
        spoonerize=spoonerize,
        source_path=str(path),
    )


def serialize_config(config: StrctConfig) -> dict[str, Any]:
    """Return the YAML-ready dict for *config* (``source_path`` is not stored)."""
    data: dict[str, Any] = {"log_level": config.log_level}
    if config.log_file:
        data["log_file"] = config.log_file
    data["distribute"] = {"keep_trailing": config.distribute.keep_trailing}
    data["spoonerize"] = {
        "first_len": config.spoonerize.first_len,
        "second_len": config.spoonerize.second_len,
    }
    return data


def save_config(config: StrctConfig, path: str | None = None) -> Path:
    """Write *config* to *path*, or back to the file it was loaded from."""
    target = Path(path or config.source_path or Path.cwd() / "strct.yaml")
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w") as f:
        yaml.dump(serialize_config(config), f, default_flow_style=False, sort_keys=False)
    return target
