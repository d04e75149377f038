"""Typed configuration loading and access.

Configuration lives in a small TOML file:

    [git]
    binary = "/usr/local/bin/git"
    timeout = 30
    network_timeout = 180

    [log]
    limit = 15

    [output]
    short_sha = 7

Every key is optional; missing keys fall back to the defaults below.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_int, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitConfig",
    "LogConfig",
    "OutputConfig",
    "CONFIG_ENV_VAR",
    "REPO_CONFIG_NAME",
    "find_config",
    "load_config",
    "load_config_or_default",
]

CONFIG_ENV_VAR = "TUSK_CONFIG"
REPO_CONFIG_NAME = ".tusk.toml"

DEFAULT_GIT_BINARY = "git"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0
DEFAULT_LOG_LIMIT = 15
DEFAULT_SHORT_SHA = 7


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """How the git binary is invoked."""

    binary: str = DEFAULT_GIT_BINARY
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    network_timeout: float = DEFAULT_NETWORK_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Defaults for log operations."""

    limit: int = DEFAULT_LOG_LIMIT


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Display settings."""

    short_sha: int = DEFAULT_SHORT_SHA


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    log: LogConfig = field(default_factory=LogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a numeric setting is out of range.
        """
        git: StrDict = get_table(data, "git") or {}
        log: StrDict = get_table(data, "log") or {}
        output: StrDict = get_table(data, "output") or {}

        timeout = get_float(git, "timeout")
        if timeout is None:
            timeout = DEFAULT_TIMEOUT_SECONDS
        network_timeout = get_float(git, "network_timeout")
        if network_timeout is None:
            network_timeout = DEFAULT_NETWORK_TIMEOUT_SECONDS
        limit = get_int(log, "limit")
        short_sha = get_int(output, "short_sha")
        if short_sha is None:
            short_sha = DEFAULT_SHORT_SHA

        if timeout <= 0 or network_timeout <= 0:
            raise ValueError("git timeouts must be positive")
        if limit is not None and limit < 0:
            raise ValueError("log.limit must not be negative")
        if not 4 <= short_sha <= 40:
            raise ValueError("output.short_sha must be between 4 and 40")

        return cls(
            git=GitConfig(
                binary=get_str(git, "binary") or DEFAULT_GIT_BINARY,
                timeout=timeout,
                network_timeout=network_timeout,
            ),
            log=LogConfig(limit=DEFAULT_LOG_LIMIT if limit is None else limit),
            output=OutputConfig(short_sha=short_sha),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def find_config(explicit: Path | None = None, repo: Path | None = None) -> Path | None:
    """Locate the config file to use.

    Lookup order: explicit path, $TUSK_CONFIG, <repo>/.tusk.toml.
    An explicit path is returned even if it does not exist so that the
    caller reports it instead of silently using defaults.
    """
    if explicit is not None:
        return explicit

    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()

    if repo is not None:
        candidate = repo / REPO_CONFIG_NAME
        if candidate.is_file():
            return candidate

    return None


def load_config_or_default(path: Path | None) -> Config:
    """Load config from file, or return the default config.

    Any failure, including a malformed file, yields the defaults.
    Use load_config() directly when errors must be reported.
    """
    if path is None:
        return Config()
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
