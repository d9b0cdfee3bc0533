"""
Runtime settings for the optimizer.

Defaults mirror the fixed behavior of the command; a handful of operational
knobs can be overridden through environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .models import DEFAULT_QUALITY, DEFAULT_SUFFIX, TARGET_EXTENSION

ENV_PREFIX = "OPTIMIZE_PUBLIC_"


@dataclass(frozen=True)
class OptimizerSettings:
    root_name: str = "public"
    quality: int = DEFAULT_QUALITY
    target_extension: str = TARGET_EXTENSION
    default_suffix: str = DEFAULT_SUFFIX
    workers: int = 1
    log_file: Optional[str] = None
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OptimizerSettings":
        """
        Build settings from ``OPTIMIZE_PUBLIC_*`` environment variables.

        Recognized: ROOT, WORKERS, LOG_FILE, LOG_LEVEL. Quality and target
        format are intentionally not configurable.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        root = env.get(ENV_PREFIX + "ROOT")
        if root:
            kwargs["root_name"] = root

        workers = env.get(ENV_PREFIX + "WORKERS")
        if workers:
            try:
                kwargs["workers"] = int(workers)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}WORKERS must be an integer, got {workers!r}") from None
            if kwargs["workers"] < 1:
                raise ValueError(f"{ENV_PREFIX}WORKERS must be at least 1, got {workers!r}")

        log_file = env.get(ENV_PREFIX + "LOG_FILE")
        if log_file:
            kwargs["log_file"] = log_file

        log_level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            level = logging.getLevelName(log_level.upper())
            if not isinstance(level, int):
                raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")
            kwargs["log_level"] = level

        return cls(**kwargs)
