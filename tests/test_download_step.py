from dojo_installer.steps import step_30_download_source
from dojo_installer.steps.step_30_download_source import DownloadSourceStep


class TestDownloadSourceStep:
    def _patch(self, monkeypatch):
        calls = []
        monkeypatch.setattr(step_30_download_source, "get_source", lambda ctx: calls.append("source"))
        monkeypatch.setattr(step_30_download_source, "get_release", lambda ctx: calls.append("release"))
        return calls

    def test_pull_source_false_is_noop(self, make_ctx, monkeypatch):
        calls = self._patch(monkeypatch)
        DownloadSourceStep().run(make_ctx(pull_source=False, source_install=True))
        assert calls == []

    def test_source_install(self, make_ctx, monkeypatch):
        calls = self._patch(monkeypatch)
        DownloadSourceStep().run(make_ctx(pull_source=True, source_install=True))
        assert calls == ["source"]

    def test_release_install(self, make_ctx, monkeypatch):
        calls = self._patch(monkeypatch)
        DownloadSourceStep().run(make_ctx(pull_source=True, source_install=False))
        assert calls == ["release"]
