"""Runtime configuration for the mstgraph command line tool.

Values are resolved from three layers, later layers winning:
environment variables (``MSTGRAPH_*``), a YAML file, and explicit overrides
such as command line flags.
"""
from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigurationError
from .graph.advanced.mst import HEAP_SIZING_MODES
from .logging_config import LOG_FORMATS

ENV_PREFIX = "MSTGRAPH_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class MSTConfig:
    """配置项"""
    log_level: str = "WARNING"  # CLI 的默认级别；直接调用 configure_logging() 时默认为 INFO
    log_format: str = "keyvalue"
    verbose: bool = False  # 打开后输出算法执行过程（DEBUG 级别）
    heap_sizing: str = "exact"  # "exact" 或 "quadratic"

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.strip().upper()), int
        ):
            raise ConfigurationError(
                f"log_level must be a standard logging level name, got {self.log_level!r}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}"
            )
        if self.heap_sizing not in HEAP_SIZING_MODES:
            raise ConfigurationError(
                f"heap_sizing must be one of {HEAP_SIZING_MODES}, got {self.heap_sizing!r}"
            )
        if not isinstance(self.verbose, bool):
            raise ConfigurationError(f"verbose must be a boolean, got {self.verbose!r}")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.verbose else self.log_level.strip().upper()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MSTConfig":
        return cls().with_overrides(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MSTConfig":
        """从 ``MSTGRAPH_LOG_LEVEL`` 等环境变量读取配置。"""
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            data[f.name] = _parse_bool(f.name, raw) if f.type in ("bool", bool) else raw
        return cls.from_mapping(data)

    @classmethod
    def from_yaml(cls, path: str | Path, base: Optional["MSTConfig"] = None) -> "MSTConfig":
        """从 YAML 文件读取配置，覆盖 ``base`` 中的取值。"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as err:
            raise ConfigurationError(f"cannot read config file {path}: {err}") from err
        except yaml.YAMLError as err:
            raise ConfigurationError(f"invalid YAML in {path}: {err}") from err
        if not isinstance(data, dict):
            raise ConfigurationError(f"config file {path} must contain a mapping")
        return (base or cls()).with_overrides(**data)

    def with_overrides(self, **overrides: Any) -> "MSTConfig":
        """返回应用了 overrides 的新配置，值为 None 的项会被忽略。"""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {sorted(unknown)}")
        cleaned = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **cleaned)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name.upper()} must be a boolean, got {raw!r}")


def load_config(
    path: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> MSTConfig:
    """按 环境变量 → YAML 文件 → 显式覆盖 的顺序合并配置。"""
    config = MSTConfig.from_env(environ)
    if path is not None:
        config = MSTConfig.from_yaml(path, base=config)
    return config.with_overrides(**overrides)
