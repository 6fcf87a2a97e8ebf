"""Typed configuration loading and access.

Configuration is optional. When present it lives in `civ.toml` at the
project root (or wherever `--config` points) and only overrides defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "EnvNames",
    "ManifestConfig",
    "OutputsConfig",
    "CONFIG_FILENAME",
    "load_config",
]

CONFIG_FILENAME = "civ.toml"

DEFAULT_MANIFEST = "package.json"
DEFAULT_OUTPUT_FILE_ENV = "GITHUB_OUTPUT"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class EnvNames:
    """Names of the CI environment variables read by the context extractor.

    Defaults follow the GitHub Actions convention.
    """

    ci: str = "CI"
    ref: str = "GITHUB_REF"
    head_ref: str = "GITHUB_HEAD_REF"
    run_number: str = "GITHUB_RUN_NUMBER"


@dataclass(frozen=True, slots=True)
class ManifestConfig:
    """Location of the JSON manifest holding the base version."""

    path: str = DEFAULT_MANIFEST


@dataclass(frozen=True, slots=True)
class OutputsConfig:
    """Where resolved values are exposed to later CI steps."""

    file_env: str = DEFAULT_OUTPUT_FILE_ENV


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    env: EnvNames = field(default_factory=EnvNames)
    outputs: OutputsConfig = field(default_factory=OutputsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        manifest: StrDict = get_table(data, "manifest") or {}
        env: StrDict = get_table(data, "env") or {}
        outputs: StrDict = get_table(data, "outputs") or {}

        defaults = EnvNames()
        return cls(
            manifest=ManifestConfig(path=get_str(manifest, "path") or DEFAULT_MANIFEST),
            env=EnvNames(
                ci=get_str(env, "ci") or defaults.ci,
                ref=get_str(env, "ref") or defaults.ref,
                head_ref=get_str(env, "head_ref") or defaults.head_ref,
                run_number=get_str(env, "run_number") or defaults.run_number,
            ),
            outputs=OutputsConfig(
                file_env=get_str(outputs, "file_env") or DEFAULT_OUTPUT_FILE_ENV,
            ),
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
        path: Path to civ.toml

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
