from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = "dojoConfig.yml"
DEFAULT_CLONE_URL = "https://github.com/DefectDojo/django-DefectDojo.git"
DEFAULT_RELEASE_URL = "https://github.com/DefectDojo/django-DefectDojo/archive/"
PYPATH_ENV = "PYPATH"


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "1", "on"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "0", "off", ""}:
        return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = raw.get(name) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return sec


@dataclass(frozen=True)
class InstallConfig:
    install_root: str = "/opt/dojo"
    source_dir_name: str = "django-DefectDojo"
    release_version: str = "2.30.0"
    pull_source: bool = True
    source_install: bool = False
    source_commit: str = ""
    source_branch: str = "dev"
    python_path: str = "/usr/bin/python3"
    clone_url: str = DEFAULT_CLONE_URL
    release_base_url: str = DEFAULT_RELEASE_URL
    dry_run: bool = False

    @property
    def source_path(self) -> str:
        return os.path.join(self.install_root, self.source_dir_name)

    @property
    def tarball_path(self) -> str:
        return os.path.join(self.install_root, f"dojo-v{self.release_version}.tar.gz")

    @property
    def release_url(self) -> str:
        return f"{self.release_base_url}{self.release_version}.tar.gz"

    @property
    def extracted_dir_name(self) -> str:
        return f"django-DefectDojo-{self.release_version}"

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "InstallConfig":
        install = _section(raw, "install")
        options = _section(raw, "options")
        d = cls()
        cfg = cls(
            install_root=str(install.get("root") or d.install_root),
            source_dir_name=str(install.get("source") or d.source_dir_name),
            release_version=str(install.get("version") or d.release_version),
            pull_source=_as_bool(install.get("pull_source", d.pull_source), "install.pull_source"),
            source_install=_as_bool(install.get("source_install", d.source_install), "install.source_install"),
            source_commit=str(install.get("source_commit") or ""),
            source_branch=str(install.get("source_branch", d.source_branch) or ""),
            python_path=str(options.get("py_path") or d.python_path),
            clone_url=str(options.get("clone_url") or d.clone_url),
            release_base_url=str(options.get("release_url") or d.release_base_url),
            dry_run=_as_bool(install.get("dry_run", False), "install.dry_run"),
        )
        if not cfg.source_dir_name or os.sep in cfg.source_dir_name:
            raise ConfigError(f"install.source must be a plain directory name, got {cfg.source_dir_name!r}")
        return cfg


def load_install_config(
    path: str = DEFAULT_CONFIG_PATH,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> InstallConfig:
    """Load the YAML install config; a missing file means all defaults."""

    env = os.environ if env is None else env
    p = Path(path)

    raw: Dict[str, Any] = {}
    if p.exists():
        try:
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Unable to parse {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping/object")

    cfg = InstallConfig.from_raw(raw)

    py_path = env.get(PYPATH_ENV)
    if py_path:
        cfg = replace(cfg, python_path=py_path)
    return cfg
