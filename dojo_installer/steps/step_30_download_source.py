from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.release import get_release
from ..lib.repository import get_source

logger = logging.getLogger(__name__)


class DownloadSourceStep:
    step_id = "30_download_source"

    def run(self, ctx: InstallContext) -> InstallContext:
        cfg = ctx.config
        ctx.spinner.section("Downloading the source for DefectDojo")

        if not cfg.pull_source:
            ctx.spinner.status("No source for DefectDojo downloaded per configuration")
            ctx.trace.debug("Source NOT downloaded as pull_source is false")
            return ctx

        ctx.trace.debug("Determining if this is a source or release install: source_install is %s", cfg.source_install)
        if cfg.source_install:
            ctx.trace.debug("Dojo will be installed from source")
            get_source(ctx)
        else:
            ctx.trace.debug("Dojo will be installed from a release tarball")
            get_release(ctx)
        return ctx
