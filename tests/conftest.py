import io
import logging
import tarfile

import pytest

from dojo_installer.context import InstallContext
from dojo_installer.install_config import InstallConfig


@pytest.fixture
def make_ctx(tmp_path):
    def _make(target_os=None, **overrides):
        values = {"install_root": str(tmp_path / "opt" / "dojo"), "source_dir_name": "django-DefectDojo"}
        values.update(overrides)
        return InstallContext(config=InstallConfig(**values), target_os=target_os)

    return _make


def build_release_tarball(version: str = "2.30.0", files=None) -> bytes:
    files = files or {"README.md": b"DefectDojo\n", "dojo/__init__.py": b"__version__ = '%s'\n" % version.encode()}
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tf:
        top = f"django-DefectDojo-{version}"
        d = tarfile.TarInfo(top)
        d.type = tarfile.DIRTYPE
        d.mode = 0o755
        tf.addfile(d)
        for name, data in files.items():
            info = tarfile.TarInfo(f"{top}/{name}")
            info.size = len(data)
            info.mode = 0o644
            tf.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def release_tarball():
    return build_release_tarball


@pytest.fixture(autouse=True)
def reset_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    root.setLevel(level)
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for attr in ("_dojo_configured", "_dojo_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
