from __future__ import annotations

from typing import Dict, Tuple

from ..lib.command import Command, Severity

_APT_ENV = "DEBIAN_FRONTEND=noninteractive"

_BASE: Tuple[Command, ...] = (
    Command(f"{_APT_ENV} apt-get update", "Unable to update apt database", Severity.HARD),
    Command(
        f"{_APT_ENV} apt-get -y install python3 python3-venv ca-certificates curl gnupg git sudo",
        "Unable to install prerequisites for installer via apt",
        Severity.HARD,
    ),
)

COMMANDS: Dict[str, Tuple[Command, ...]] = {
    "11": _BASE,
    "12": _BASE + (
        Command(
            f"{_APT_ENV} apt-get -y install python3.11-venv",
            "Unable to install the Python 3.11 venv module",
            Severity.SOFT,
        ),
    ),
}
