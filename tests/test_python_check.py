import pytest

from dojo_installer.errors import PythonVersionError
from dojo_installer.lib import python_check
from dojo_installer.lib.command import CmdResult
from dojo_installer.lib.python_check import check_python_version, is_supported_version, parse_python_version


class TestParsePythonVersion:
    @pytest.mark.parametrize(
        "output,ok",
        [
            ("Python 3.11.4", True),
            ("Python 3.11.4\n", True),
            ("Python 3.11.0rc1\nextra line", True),
            ("Python 3.10.9", False),
            ("Python 3.12.1", False),
            ("Python3.11.4", False),
            ("", False),
        ],
    )
    def test_is_supported_version(self, output, ok):
        assert is_supported_version(output) is ok

    def test_second_token_of_first_line(self):
        assert parse_python_version("Python 3.11.4\nPython 2.7") == "3.11.4"

    def test_no_space_has_no_version(self):
        assert parse_python_version("Python3.11.4") is None


class TestCheckPythonVersion:
    def _patch(self, monkeypatch, output, returncode=0, on_path=True):
        calls = []

        def fake_run_cmd(argv, dry_run=False):
            calls.append(list(argv))
            return CmdResult(argv=list(argv), returncode=returncode, output=output)

        monkeypatch.setattr(python_check.shutil, "which", lambda name: "/usr/bin/python3" if on_path else None)
        monkeypatch.setattr(python_check, "run_cmd", fake_run_cmd)
        return calls

    def test_runs_configured_interpreter(self, monkeypatch):
        calls = self._patch(monkeypatch, "Python 3.11.4\n")
        assert check_python_version("/opt/py311/bin/python3.11") == "3.11.4"
        assert calls == [["/opt/py311/bin/python3.11", "--version"]]

    def test_wrong_version(self, monkeypatch):
        self._patch(monkeypatch, "Python 3.10.9\n")
        with pytest.raises(PythonVersionError, match="PYPATH"):
            check_python_version("/usr/bin/python3")

    def test_python3_missing_from_path(self, monkeypatch):
        calls = self._patch(monkeypatch, "", on_path=False)
        with pytest.raises(PythonVersionError, match="Unable to find python3"):
            check_python_version("/usr/bin/python3")
        assert calls == []

    def test_interpreter_fails(self, monkeypatch):
        self._patch(monkeypatch, "boom", returncode=127)
        with pytest.raises(PythonVersionError, match="Failed to run"):
            check_python_version("/nope/python")
