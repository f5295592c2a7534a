"""ContextVar-based scan configuration for stringscanner.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Scanner snapshots the active config when it is constructed, so changing
the config afterwards never affects a scanner that is already running.

Usage:
    from stringscanner.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(max_token_length=4096)):
        scanner = Scanner.from_string(source)

    # Or set it for the whole context
    set_scan_config(ScanConfig(encoding="latin-1"))
    try:
        scanner = Scanner.from_bytes(data)
    finally:
        reset_scan_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        encoding: Codec used when a scanner is built over bytes
        errors: Codec error handler used when decoding bytes
        max_token_length: Largest buffer a single read may accumulate
            before raising TokenLimitError; None means unbounded
        track_locations: Maintain line/column counters for tokens

    """

    encoding: str = "utf-8"
    errors: str = "strict"
    max_token_length: int | None = None
    track_locations: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "encoding": "utf-16",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'utf-16'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the scan configuration for the current context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for the current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
