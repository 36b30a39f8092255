"""Persisted CLI configuration.

The config is a small TOML file holding the defaults that every command
would otherwise need as flags:

  api_address = "https://kargo.example.com"
  project = "my-project"
  bearer_token = "..."
  insecure_skip_tls_verify = false

Location: `<user-config-dir>/config.toml`, or the path in FREIGHTCTL_CONFIG.
A missing file is not an error; it yields the default (empty) config.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from freightctl.platform.paths import user_config_dir

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str

__all__ = [
    "CLIConfig",
    "ConfigError",
    "CONFIG_ENV_VAR",
    "config_path",
    "load_config",
    "save_config",
]

CONFIG_ENV_VAR = "FREIGHTCTL_CONFIG"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be read, parsed or written."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class CLIConfig:
    api_address: str | None = None
    project: str | None = None
    bearer_token: str | None = None
    insecure_skip_tls_verify: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> CLIConfig:
        """Create CLIConfig from a mapping (parsed TOML)."""
        return cls(
            api_address=get_str(data, "api_address"),
            project=get_str(data, "project"),
            bearer_token=get_str(data, "bearer_token"),
            insecure_skip_tls_verify=bool(get_bool(data, "insecure_skip_tls_verify")),
        )

    def with_project(self, project: str) -> CLIConfig:
        return replace(self, project=project.strip() or None)

    def with_server(self, address: str, *, insecure_skip_tls_verify: bool) -> CLIConfig:
        return replace(
            self,
            api_address=address.strip().rstrip("/") or None,
            insecure_skip_tls_verify=insecure_skip_tls_verify,
        )

    def to_toml(self) -> str:
        lines: list[str] = []
        if self.api_address:
            lines.append(f"api_address = {_toml_str(self.api_address)}")
        if self.project:
            lines.append(f"project = {_toml_str(self.project)}")
        if self.bearer_token:
            lines.append(f"bearer_token = {_toml_str(self.bearer_token)}")
        if self.insecure_skip_tls_verify:
            lines.append("insecure_skip_tls_verify = true")
        return "".join(f"{line}\n" for line in lines)


def _toml_str(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes.
    return json.dumps(value, ensure_ascii=False)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return user_config_dir() / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict | None, ConfigError]:
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return Ok(None)
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading {path}: {e}", path=path))

    try:
        data_obj: object = tomllib.loads(raw.decode("utf-8"))
    except tomllib.TOMLDecodeError as e:
        return Err(
            ConfigError(
                f"Invalid TOML syntax: {e}",
                path=path,
                hint=f"Fix or remove {path}",
            )
        )
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Invalid UTF-8 in config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path | None = None) -> Result[CLIConfig, ConfigError]:
    """Load the CLI config.

    Args:
        path: Config file to read. Defaults to `config_path()`.

    Returns:
        Ok(CLIConfig) (defaults when the file does not exist), or
        Err(ConfigError) when the file is unreadable or malformed.
    """
    path = path or config_path()
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    if result.value is None:
        return Ok(CLIConfig())
    return Ok(CLIConfig.from_dict(result.value))


def save_config(config: CLIConfig, path: Path | None = None) -> Result[Path, ConfigError]:
    """Persist the CLI config, creating the parent directory if needed."""
    path = path or config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(ConfigError(f"Could not create {path.parent}: {e}", path=path))

    try:
        path.write_text(config.to_toml(), encoding="utf-8", newline="\n")
    except OSError as e:
        return Err(ConfigError(f"Could not write {path}: {e}", path=path))
    return Ok(path)
