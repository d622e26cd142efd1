from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.python_check import REQUIRED_PREFIX, check_python_version

logger = logging.getLogger(__name__)


class CheckPythonStep:
    step_id = "20_check_python"

    def run(self, ctx: InstallContext) -> InstallContext:
        ctx.spinner.section(f"Checking for Python {REQUIRED_PREFIX}")
        check_python_version(ctx.config.python_path, dry_run=ctx.config.dry_run)
        ctx.spinner.status(f"Python {REQUIRED_PREFIX} found, install can continue")
        return ctx
