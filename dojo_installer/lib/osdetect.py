from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"

# Rebuilds and clones of RHEL share its command tables.
_ID_ALIASES = {
    "rocky": "rhel",
    "almalinux": "rhel",
    "centos": "rhel",
    "redhat": "rhel",
}


@dataclass(frozen=True)
class TargetOS:
    distro: str
    version_id: str

    def __str__(self) -> str:
        return f"{self.distro}:{self.version_id}"


def parse_os_release(text: str) -> Dict[str, str]:
    data: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        try:
            parts = shlex.split(value)
        except ValueError:
            parts = [value.strip('"').strip("'")]
        data[key.strip()] = parts[0] if parts else ""
    return data


def normalize_distro(os_id: str) -> str:
    d = os_id.strip().lower()
    return _ID_ALIASES.get(d, d)


def detect_target_os(path: str = OS_RELEASE_PATH) -> TargetOS:
    """Read ID/VERSION_ID from os-release.

    An unreadable file yields an "unknown" distro; the command resolver is
    what decides whether that is fatal.
    """

    p = Path(path)
    try:
        info = parse_os_release(p.read_text(encoding="utf-8", errors="ignore"))
    except OSError as e:
        logger.warning("Unable to read %s: %s", path, e)
        info = {}

    target = TargetOS(
        distro=normalize_distro(info.get("ID", "unknown")),
        version_id=info.get("VERSION_ID", ""),
    )
    logger.info("Detected target OS %s", target)
    return target
