import pytest

from dojo_installer.errors import HardCommandFailure, UnsupportedDistro
from dojo_installer.lib.command import Command, Severity
from dojo_installer.lib.osdetect import TargetOS
from dojo_installer.steps import step_10_bootstrap
from dojo_installer.steps.step_10_bootstrap import BootstrapStep


def _touch(path):
    return f"touch {path}"


class TestBootstrapStep:
    def test_hard_failure_halts_before_next_command(self, make_ctx, tmp_path, monkeypatch):
        first, after = tmp_path / "first", tmp_path / "after"
        cmds = (
            Command(_touch(first), "first failed", Severity.HARD),
            Command("exit 1", "hard failure", Severity.HARD),
            Command(_touch(after), "after failed", Severity.HARD),
        )
        monkeypatch.setattr(step_10_bootstrap, "resolve_commands", lambda distro, version: cmds)

        ctx = make_ctx(target_os=TargetOS("ubuntu", "22.04"))
        with pytest.raises(HardCommandFailure):
            BootstrapStep().run(ctx)
        assert first.exists()
        assert not after.exists()

    def test_soft_failure_continues(self, make_ctx, tmp_path, monkeypatch):
        after = tmp_path / "after"
        cmds = (
            Command("exit 1", "soft failure", Severity.SOFT),
            Command(_touch(after), "after failed", Severity.HARD),
        )
        monkeypatch.setattr(step_10_bootstrap, "resolve_commands", lambda distro, version: cmds)

        ctx = make_ctx(target_os=TargetOS("ubuntu", "22.04"))
        BootstrapStep().run(ctx)
        assert after.exists()

    def test_detects_target_os_when_not_given(self, make_ctx, monkeypatch):
        seen = {}

        def fake_resolve(distro, version):
            seen["target"] = (distro, version)
            return ()

        monkeypatch.setattr(step_10_bootstrap, "detect_target_os", lambda: TargetOS("rhel", "9.2"))
        monkeypatch.setattr(step_10_bootstrap, "resolve_commands", fake_resolve)

        ctx = BootstrapStep().run(make_ctx())
        assert seen["target"] == ("rhel", "9.2")
        assert ctx.target_os == TargetOS("rhel", "9.2")

    def test_unsupported_distro_propagates(self, make_ctx):
        ctx = make_ctx(target_os=TargetOS("arch", "rolling"))
        with pytest.raises(UnsupportedDistro):
            BootstrapStep().run(ctx)
