from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
import os
from pathlib import Path
import tomllib
from typing import cast

from .constants import CodeSystems, Defaults, Encodings, EnvVars
from .domain.exceptions import InvalidConfigurationError

_PATH_KEYS = frozenset({"output_dir"})
_PROCESSOR_KEYS = frozenset(
    {"encoding", "canonical_base", "header_row", "internal_system"}
)


def _default_code_systems() -> dict[str, str]:
    return dict(CodeSystems.EXTERNAL)


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    output_dir: Path = field(default_factory=lambda: Path(Defaults.OUTPUT_DIR))
    encoding: str = Defaults.ENCODING
    canonical_base: str = Defaults.CANONICAL_BASE
    header_row: int = Defaults.HEADER_ROW
    internal_system: str = CodeSystems.OPENMRS
    code_systems: Mapping[str, str] = field(default_factory=_default_code_systems)

    def __post_init__(self) -> None:
        if self.encoding not in Encodings.SUPPORTED:
            raise InvalidConfigurationError(
                f"encoding must be one of {', '.join(Encodings.SUPPORTED)}, got {self.encoding!r}"
            )
        if not self.canonical_base:
            raise InvalidConfigurationError("canonical_base is required")
        if self.canonical_base.endswith("/"):
            raise InvalidConfigurationError(
                f"canonical_base must not end with a slash, got {self.canonical_base}"
            )
        if self.header_row < 0:
            raise InvalidConfigurationError(
                f"header_row must not be negative, got {self.header_row}"
            )
        if not self.internal_system:
            raise InvalidConfigurationError("internal_system is required")
        for key, system in self.code_systems.items():
            if not key or not system:
                raise InvalidConfigurationError(
                    f"code system entries need a key and a URI, got {key!r}={system!r}"
                )

    @classmethod
    def from_env(cls) -> ProcessorConfig:
        return cls(
            output_dir=Path(os.getenv(EnvVars.OUTPUT_DIR, Defaults.OUTPUT_DIR)),
            encoding=os.getenv(EnvVars.ENCODING, Defaults.ENCODING).lower(),
            canonical_base=os.getenv(EnvVars.CANONICAL_BASE, Defaults.CANONICAL_BASE),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ProcessorConfig:
        config = ProcessorConfig.from_env()
        if config_file is None:
            default_file = Path(Defaults.CONFIG_FILE)
            if not default_file.exists():
                return config
            config_file = default_file
        elif not config_file.exists():
            raise InvalidConfigurationError(f"Config file not found: {config_file}")
        return ConfigLoader._load_from_toml(config_file, config)

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ProcessorConfig
    ) -> ProcessorConfig:
        try:
            with config_file.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                f"Failed to load config from {config_file}: {e}"
            ) from e
        paths = _get_table(data, "paths", allowed=_PATH_KEYS)
        processor = _get_table(data, "processor", allowed=_PROCESSOR_KEYS)
        code_systems = _get_table(data, "code_systems")
        config = base_config
        if value := paths.get("output_dir"):
            config = replace(config, output_dir=Path(str(value)))
        if (value := processor.get("encoding")) is not None:
            config = replace(config, encoding=str(value).lower())
        if (value := processor.get("canonical_base")) is not None:
            config = replace(config, canonical_base=str(value))
        if (value := processor.get("header_row")) is not None:
            config = replace(
                config, header_row=_coerce_int(value, key="processor.header_row")
            )
        if (value := processor.get("internal_system")) is not None:
            config = replace(config, internal_system=str(value))
        if code_systems:
            config = replace(
                config,
                code_systems={str(k): str(v) for k, v in code_systems.items()},
            )
        return config


def _get_table(
    data: Mapping[str, object], key: str, *, allowed: frozenset[str] | None = None
) -> Mapping[str, object]:
    value = data.get(key)
    if not isinstance(value, Mapping):
        return {}
    table = cast("Mapping[str, object]", value)
    if allowed is not None:
        unknown = sorted(set(table) - allowed)
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown flag(s) in [{key}]: {', '.join(unknown)}"
            )
    return table


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise InvalidConfigurationError(f"{key} must be int-like, got {value!r}") from e
    raise InvalidConfigurationError(
        f"{key} must be int-like or string, got {type(value).__name__}"
    )
