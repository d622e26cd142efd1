from __future__ import annotations

from typing import Dict, Tuple

from ..lib.command import Command, Severity

COMMANDS: Dict[str, Tuple[Command, ...]] = {
    "8": (
        Command("dnf -y update", "Unable to update OS packages via dnf", Severity.SOFT),
        Command(
            "dnf -y install python3.11 python3.11-devel git sudo curl ca-certificates",
            "Unable to install prerequisites for installer via dnf",
            Severity.HARD,
        ),
        Command(
            "alternatives --set python3 /usr/bin/python3.11",
            "Unable to make python3.11 the default python3",
            Severity.SOFT,
        ),
    ),
    "9": (
        Command("dnf -y update", "Unable to update OS packages via dnf", Severity.SOFT),
        Command(
            "dnf -y install python3.11 python3.11-devel git sudo curl ca-certificates",
            "Unable to install prerequisites for installer via dnf",
            Severity.HARD,
        ),
    ),
}


def normalize_version(version_id: str) -> str:
    """RHEL reports minor releases (8.9, 9.3); tables are keyed by major."""

    return version_id.split(".", 1)[0]
