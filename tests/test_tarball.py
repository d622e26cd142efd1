import io
import tarfile
import zlib

import pytest

from dojo_installer.errors import ReleaseExtractError
from dojo_installer.lib.tarball import extract_tarball


def _write(path, data):
    path.write_bytes(data)
    return str(path)


class TestExtractTarball:
    def test_preserves_relative_paths(self, tmp_path, release_tarball):
        archive = _write(tmp_path / "r.tar.gz", release_tarball("2.30.0"))
        dest = tmp_path / "root"

        tops = extract_tarball(archive, str(dest))

        assert tops == ["django-DefectDojo-2.30.0"]
        assert (dest / "django-DefectDojo-2.30.0" / "README.md").read_text() == "DefectDojo\n"
        assert (dest / "django-DefectDojo-2.30.0" / "dojo" / "__init__.py").exists()

    def test_rejects_path_traversal(self, tmp_path):
        buf = io.BytesIO()
        with tarfile.open(fileobj=buf, mode="w:gz") as tf:
            info = tarfile.TarInfo("../evil.txt")
            info.size = 1
            tf.addfile(info, io.BytesIO(b"x"))
        archive = _write(tmp_path / "bad.tar.gz", buf.getvalue())

        with pytest.raises(ReleaseExtractError):
            extract_tarball(archive, str(tmp_path / "root"))
        assert not (tmp_path / "evil.txt").exists()

    @pytest.mark.parametrize("cut", [None, 40])
    def test_corrupt_or_truncated_archive(self, tmp_path, release_tarball, cut):
        data = b"not a tarball" if cut is None else release_tarball("2.30.0")[:cut]
        archive = _write(tmp_path / "bad.tar.gz", data)

        with pytest.raises(ReleaseExtractError, match="Unable to extract") as exc:
            extract_tarball(archive, str(tmp_path / "root"))
        assert isinstance(exc.value.__cause__, (tarfile.TarError, EOFError, zlib.error))
