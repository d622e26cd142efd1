from __future__ import annotations

import dataclasses
import logging

from ..context import InstallContext
from ..distros import resolve_commands
from ..lib.command import execute_command
from ..lib.osdetect import detect_target_os

logger = logging.getLogger(__name__)


class BootstrapStep:
    step_id = "10_bootstrap"

    def run(self, ctx: InstallContext) -> InstallContext:
        ctx.spinner.section("Bootstrapping the installer")

        target = ctx.target_os or detect_target_os()
        ctx = dataclasses.replace(ctx, target_os=target)

        ctx.trace.debug("Searching for commands for bootstrapping %s", target)
        cmds = resolve_commands(target.distro, target.version_id)

        failed = 0
        with ctx.spinner.running("Bootstrapping..."):
            for cmd in cmds:
                outcome = execute_command(cmd, log=ctx.trace, dry_run=ctx.config.dry_run)
                if not outcome.ok:
                    failed += 1

        if failed:
            logger.warning("%d non-fatal bootstrap command(s) failed, see the log for details", failed)
        ctx.spinner.status("Bootstrapping installer complete")
        return ctx
