from __future__ import annotations

import logging
import os
import tarfile
import zlib
from pathlib import Path
from typing import List

from ..errors import ReleaseExtractError

logger = logging.getLogger(__name__)


def _check_member(root: Path, member: tarfile.TarInfo) -> None:
    target = (root / member.name).resolve()
    if member.name.startswith("/") or not (target == root or root in target.parents):
        raise ReleaseExtractError(f"Refusing to extract {member.name!r} outside of {root}")
    if member.issym() or member.islnk():
        link = (target.parent / member.linkname).resolve() if member.issym() else (root / member.linkname).resolve()
        if not (link == root or root in link.parents):
            raise ReleaseExtractError(f"Refusing to extract link {member.name!r} -> {member.linkname!r}")


def extract_tarball(archive_path: str, destination_root: str) -> List[str]:
    """Extract a .tar.gz under destination_root, preserving relative paths.

    Returns the sorted top-level entry names. Renaming the extracted
    directory is left to the caller.
    """

    root = Path(destination_root).resolve()
    os.makedirs(root, 0o755, exist_ok=True)

    tops = set()
    try:
        with tarfile.open(archive_path, mode="r:gz") as tf:
            members = tf.getmembers()
            for m in members:
                _check_member(root, m)

            for m in members:
                tf.extract(m, path=str(root), filter="data")
                tops.add(m.name.split("/", 1)[0])
    except (tarfile.TarError, EOFError, zlib.error) as e:
        raise ReleaseExtractError(f"Unable to extract {archive_path}: {e}") from e

    logger.info("Extracted %d entries from %s into %s", len(members), archive_path, root)
    return sorted(t for t in tops if t not in {"", "."})
