from __future__ import annotations

import logging
import shutil

from ..errors import PythonVersionError
from .command import run_cmd

logger = logging.getLogger(__name__)

REQUIRED_PREFIX = "3.11"


def parse_python_version(output: str) -> str | None:
    """Return the version token from `python --version` output.

    The version must be the second whitespace-separated token of the first
    line ("Python 3.11.4"); anything else yields None.
    """

    lines = output.splitlines()
    if not lines:
        return None
    tokens = lines[0].split()
    if len(tokens) < 2:
        return None
    return tokens[1]


def is_supported_version(output: str, prefix: str = REQUIRED_PREFIX) -> bool:
    version = parse_python_version(output)
    return version is not None and version.startswith(prefix)


def check_python_version(py_path: str, *, dry_run: bool = False) -> str:
    """Verify python3 is on PATH and that py_path is a 3.11 interpreter.

    Returns the version string reported by the interpreter.
    """

    if shutil.which("python3") is None:
        raise PythonVersionError("Unable to find python3 binary in the path")

    if dry_run:
        logger.info("DRY-RUN skipping interpreter version check for %s", py_path)
        return REQUIRED_PREFIX

    try:
        r = run_cmd([py_path, "--version"])
    except OSError as e:
        raise PythonVersionError(f"Failed to run {py_path}, error was: {e}") from e
    if r.returncode != 0:
        raise PythonVersionError(f"Failed to run {py_path} (exit {r.returncode}): {r.output.strip()}")

    if not is_supported_version(r.output):
        raise PythonVersionError(
            f"Python {REQUIRED_PREFIX} wasn't found ({py_path} reported {r.output.strip()!r}). "
            f"Set PYPATH to a Python {REQUIRED_PREFIX}.x installation and re-run, "
            f"e.g. PYPATH=\"/path/to/python{REQUIRED_PREFIX}\" dojo-installer"
        )

    version = parse_python_version(r.output) or ""
    logger.info("Python %s found at %s", version, py_path)
    return version
