"""Validated resolver settings."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from kernelpath.errors import ConfigError
from kernelpath.policies import DeviceNamePolicy, DriveStreamStrictness

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class ResolverConfig:
    """Settings chosen once per process."""

    device_policy: DeviceNamePolicy = DeviceNamePolicy.MODERN
    extended_length: bool = False
    drive_stream_strictness: DriveStreamStrictness = DriveStreamStrictness.STRICT
    existence_timeout: float | None = 5.0
    current_directory: str = "C:\\"
    drive_directories: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "ResolverConfig":
        """Build a config from a loaded dictionary, rejecting bad values."""
        defaults = cls()
        timeout = config.get("existence_timeout", defaults.existence_timeout)
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, int | float)
        ):
            msg = f"existence_timeout must be a number or null, got {timeout!r}"
            raise ConfigError(msg)

        extended = config.get("extended_length", defaults.extended_length)
        if not isinstance(extended, bool):
            msg = f"extended_length must be true or false, got {extended!r}"
            raise ConfigError(msg)

        cwd = config.get("current_directory", defaults.current_directory)
        if not isinstance(cwd, str):
            msg = f"current_directory must be a string, got {cwd!r}"
            raise ConfigError(msg)

        drives = config.get("drive_directories") or {}
        if not isinstance(drives, Mapping) or not all(
            isinstance(v, str) for v in drives.values()
        ):
            msg = "drive_directories must map drive letters to path strings"
            raise ConfigError(msg)

        return cls(
            device_policy=_enum_value(
                DeviceNamePolicy, config, "device_policy", defaults.device_policy
            ),
            extended_length=extended,
            drive_stream_strictness=_enum_value(
                DriveStreamStrictness,
                config,
                "drive_stream_strictness",
                defaults.drive_stream_strictness,
            ),
            existence_timeout=float(timeout) if timeout is not None else None,
            current_directory=cwd,
            drive_directories={str(k).upper(): v for k, v in drives.items()},
        )


def _enum_value(enum_cls: type[E], config: Mapping[str, Any], key: str, default: E) -> E:
    raw = config.get(key, default.value)
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        msg = f"{key} must be one of {choices}, got {raw!r}"
        raise ConfigError(msg) from None
