"""Configuration for word cloud generation."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import UsageError
from .source import CACHE_DIR_NAME, DEFAULT_TIMEOUT


@dataclass
class CloudConfig:
    """Settings shared by the command line and the preview server."""

    seed: int | None = None  # None = unseeded, colors differ between runs
    clamp: bool = False  # clamp N to the number of distinct words
    keep_empty: bool = False  # count tokens with no letters or digits under ""
    encoding: str = "utf-8"
    stylesheet: bool = False  # copy the bundled tagcloud.css next to the output
    cache_dir: str | None = None  # None = .tagcloud-cache next to the output
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate field types."""
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise UsageError(f"'seed' must be an integer, got {self.seed!r}")
        for name in ("clamp", "keep_empty", "stylesheet"):
            if not isinstance(getattr(self, name), bool):
                raise UsageError(f"'{name}' must be true or false, got {getattr(self, name)!r}")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise UsageError(f"'encoding' must be a non-empty string, got {self.encoding!r}")
        if self.cache_dir is not None and not isinstance(self.cache_dir, str):
            raise UsageError(f"'cache_dir' must be a path string, got {self.cache_dir!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout < 1:
            raise UsageError(f"'timeout' must be a positive integer, got {self.timeout!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CloudConfig":
        """Create CloudConfig from a YAML dict."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise UsageError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load configuration from a YAML file.

        Relative ``cache_dir`` values are resolved against the directory
        containing the YAML file.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise UsageError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise UsageError(f"Invalid YAML in config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise UsageError(f"Config file {path} must contain a mapping")

        config = cls.from_dict(data)
        if config.cache_dir is not None and not Path(config.cache_dir).is_absolute():
            config.cache_dir = str(path.parent.resolve() / config.cache_dir)
        return config

    def override(self, overrides: dict[str, Any]) -> None:
        """Override values, ignoring entries set to None."""
        known = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if key not in known:
                raise UsageError(f"Unknown config key: {key}")
            if value is not None:
                setattr(self, key, value)
        self.__post_init__()

    def resolve_cache_dir(self, output_path: Path) -> Path:
        """Return the download cache directory for a given output page."""
        if self.cache_dir is not None:
            return Path(self.cache_dir)
        return output_path.parent / CACHE_DIR_NAME
