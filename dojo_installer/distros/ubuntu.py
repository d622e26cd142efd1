from __future__ import annotations

from typing import Dict, Tuple

from ..lib.command import Command, Severity

_APT_ENV = "DEBIAN_FRONTEND=noninteractive"

_BASE: Tuple[Command, ...] = (
    Command(
        f"{_APT_ENV} apt-get update",
        "Unable to update apt database",
        Severity.HARD,
    ),
    Command(
        f"{_APT_ENV} apt-get -y upgrade",
        "Unable to upgrade OS packages",
        Severity.SOFT,
    ),
    Command(
        f"{_APT_ENV} apt-get -y install python3 python3-virtualenv ca-certificates curl gnupg git sudo",
        "Unable to install prerequisites for installer via apt",
        Severity.HARD,
    ),
)

# Older releases ship 3.8/3.9 as python3; pull 3.11 from the deadsnakes PPA.
_DEADSNAKES: Tuple[Command, ...] = (
    Command(
        f"{_APT_ENV} apt-get -y install software-properties-common",
        "Unable to install software-properties-common",
        Severity.HARD,
    ),
    Command(
        "add-apt-repository -y ppa:deadsnakes/ppa",
        "Unable to add the deadsnakes PPA",
        Severity.HARD,
    ),
    Command(
        f"{_APT_ENV} apt-get update",
        "Unable to update apt database after adding deadsnakes",
        Severity.HARD,
    ),
    Command(
        f"{_APT_ENV} apt-get -y install python3.11 python3.11-venv python3.11-dev",
        "Unable to install Python 3.11",
        Severity.HARD,
    ),
)

COMMANDS: Dict[str, Tuple[Command, ...]] = {
    "20.04": _BASE + _DEADSNAKES,
    "21.04": _BASE + _DEADSNAKES,
    "22.04": _BASE + _DEADSNAKES,
}
