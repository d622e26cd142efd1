from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import List, Optional

import httpx

from .context import InstallContext
from .errors import InstallerError
from .install_config import DEFAULT_CONFIG_PATH, InstallConfig, load_install_config
from .lib.osdetect import TargetOS, normalize_distro
from .lib.progress import Spinner
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, run_pipeline
from .steps import BootstrapStep, CheckPythonStep, DownloadSourceStep

logger = logging.getLogger(__name__)


def build_steps():
    return [
        BootstrapStep(),
        CheckPythonStep(),
        DownloadSourceStep(),
    ]


def run(
    config: InstallConfig,
    *,
    target_os: Optional[TargetOS] = None,
    spinner: Optional[Spinner] = None,
    skip: List[str] | None = None,
) -> PipelineResult:
    """Bootstrap the machine, check the interpreter, then acquire the source.

    Errors propagate; deciding whether they are fatal is left to main().
    """

    ctx = InstallContext(config=config, target_os=target_os)
    if spinner is not None:
        ctx = dataclasses.replace(ctx, spinner=spinner)

    ctx.trace.debug("Install configuration: %s", config)
    result = run_pipeline(ctx=ctx, steps=build_steps(), skip=skip or [])
    logger.info("Install steps ran: %s (skipped: %s)", result.ran_steps, result.skipped_steps)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="dojo-installer")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to install config (YAML)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer trace log")
    p.add_argument("--verbose", action="store_true", help="Echo trace messages to the console")
    p.add_argument("--quiet", action="store_true", help="No spinner or console log output")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("--skip-bootstrap", action="store_true", help="Do not run the OS bootstrap commands")
    p.add_argument("--distro", default=None, help="Override detected distro (e.g. ubuntu, rhel)")
    p.add_argument("--distro-version", default=None, help="Override detected distro version id (e.g. 22.04)")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log, also_console=not args.quiet, verbose=args.verbose)
    spinner = Spinner(enabled=not args.quiet)

    target_os = None
    if args.distro:
        target_os = TargetOS(distro=normalize_distro(args.distro), version_id=args.distro_version or "")

    skip = [BootstrapStep.step_id] if args.skip_bootstrap else []

    try:
        config = load_install_config(args.config)
        if args.dry_run:
            config = dataclasses.replace(config, dry_run=True)
        run(config, target_os=target_os, spinner=spinner, skip=skip)
    except InstallerError as e:
        logger.debug("Installer failed", exc_info=True)
        spinner.error(str(e))
        return 1
    except (OSError, httpx.HTTPError) as e:
        logger.debug("Installer failed", exc_info=True)
        spinner.error(f"Error attempting to install DefectDojo was:\n    {e}")
        return 1

    return 0
