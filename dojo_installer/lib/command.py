from __future__ import annotations

import enum
import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

from ..errors import HardCommandFailure

logger = logging.getLogger(__name__)


class Severity(enum.Enum):
    HARD = "hard"
    SOFT = "soft"


@dataclass(frozen=True)
class Command:
    """One shell instruction from a bootstrap command table."""

    instruction: str
    failure_message: str
    severity: Severity = Severity.HARD


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    output: str


@dataclass(frozen=True)
class CommandOutcome:
    command: Command
    ok: bool
    returncode: int
    output: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(argv: Sequence[str], *, dry_run: bool = False) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - stdout and stderr are combined into a single output string.
    - Never raises on a non-zero exit; callers inspect returncode.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, output="")

    p = subprocess.run(
        argv_list,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )

    if p.stdout:
        logger.debug("OUTPUT %s", p.stdout.strip())

    return CmdResult(argv=argv_list, returncode=p.returncode, output=p.stdout or "")


def execute_command(
    cmd: Command,
    *,
    log: logging.Logger,
    dry_run: bool = False,
) -> CommandOutcome:
    """Run one bootstrap command through the shell.

    A failed HARD command raises HardCommandFailure; a failed SOFT command is
    logged and reported back with ok=False so the caller can move on.
    """

    log.debug("Running bootstrap command: %s", cmd.instruction)
    if dry_run:
        log.info("DRY-RUN %s", cmd.instruction)
        return CommandOutcome(command=cmd, ok=True, returncode=0, output="")

    p = subprocess.run(
        ["/bin/sh", "-c", cmd.instruction],
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    output = p.stdout or ""

    if p.returncode == 0:
        log.debug("Command succeeded: %s\n%s", cmd.instruction, output.strip())
        return CommandOutcome(command=cmd, ok=True, returncode=0, output=output)

    if cmd.severity is Severity.HARD:
        log.error(
            "%s (exit %d): %s\n%s", cmd.failure_message, p.returncode, cmd.instruction, output.strip()
        )
        raise HardCommandFailure(cmd.failure_message, cmd.instruction, p.returncode, output)

    log.warning(
        "%s (exit %d, continuing): %s\n%s", cmd.failure_message, p.returncode, cmd.instruction, output.strip()
    )
    return CommandOutcome(command=cmd, ok=False, returncode=p.returncode, output=output)
