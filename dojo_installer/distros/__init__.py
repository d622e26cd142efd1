"""Per-distro bootstrap command tables.

Each supported family owns an independent mapping of version id -> ordered
command tuple. Adding a family means adding a module and an enum member;
nothing in the execution path changes.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Tuple, Union

from ..errors import NoCommandsForVersion, UnsupportedDistro
from ..lib.command import Command
from . import debian, rhel, ubuntu

logger = logging.getLogger(__name__)


def _same(version_id: str) -> str:
    return version_id


class DistroFamily(enum.Enum):
    UBUNTU = "ubuntu"
    DEBIAN = "debian"
    RHEL = "rhel"

    @classmethod
    def parse(cls, name: Union[str, "DistroFamily"]) -> "DistroFamily":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnsupportedDistro(str(name)) from None

    @property
    def commands(self) -> Dict[str, Tuple[Command, ...]]:
        return _TABLES[self][0]

    def normalize_version(self, version_id: str) -> str:
        return _TABLES[self][1](version_id)


_TABLES: Dict[DistroFamily, Tuple[Dict[str, Tuple[Command, ...]], Callable[[str], str]]] = {
    DistroFamily.UBUNTU: (ubuntu.COMMANDS, _same),
    DistroFamily.DEBIAN: (debian.COMMANDS, _same),
    DistroFamily.RHEL: (rhel.COMMANDS, rhel.normalize_version),
}


def resolve_commands(family: Union[str, DistroFamily], version_id: str) -> Tuple[Command, ...]:
    """Return the ordered bootstrap commands for a distro family + version."""

    fam = DistroFamily.parse(family)
    table = fam.commands
    version_id = str(version_id).strip()

    cmds = table.get(version_id)
    if cmds is None:
        cmds = table.get(fam.normalize_version(version_id))
    if not cmds:
        raise NoCommandsForVersion(fam.value, version_id)

    logger.debug("Resolved %d bootstrap commands for %s %s", len(cmds), fam.value, version_id)
    return cmds


def supported_targets() -> list[tuple[DistroFamily, str]]:
    return [(fam, version_id) for fam in DistroFamily for version_id in fam.commands]


__all__ = ["DistroFamily", "resolve_commands", "supported_targets"]
