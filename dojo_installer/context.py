from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .install_config import InstallConfig
from .lib.osdetect import TargetOS
from .lib.progress import Spinner
from .logging_utils import trace_logger


@dataclass(frozen=True)
class InstallContext:
    """Everything a run needs, built once in main and passed to each step."""

    config: InstallConfig
    target_os: TargetOS | None = None
    spinner: Spinner = field(default_factory=lambda: Spinner(enabled=False))
    trace: logging.Logger = field(default_factory=trace_logger)
