"""
Tests for the command-line interface.
"""

import json

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli import main


BASELINE = "abcabcabcabcabcabcabc"


class TestDiffCommand:
    """Tests for the one-shot diff command."""

    def test_prints_delta(self, capsys):
        code = main([
            "diff", "--content", BASELINE, "--file-version", "13",
            "--text", "abca2cabcabcabcabcabc5f",
        ])

        output = json.loads(capsys.readouterr().out)
        assert code == 0
        assert output["current_version"] == 13
        assert output["updated_version"] == 14
        assert [entry["Type"] for entry in output["delta"]] == ["UPDATED", "ADDED", "ADDED"]

    def test_reads_files(self, tmp_path, capsys):
        base = tmp_path / "base.txt"
        new = tmp_path / "new.txt"
        base.write_text(BASELINE, encoding="utf-8")
        new.write_text("abcabcabcaxcabcabca", encoding="utf-8")

        code = main([
            "diff", "--content-file", str(base), "--file-version", "2",
            "--text-file", str(new), "--version", "3",
        ])

        output = json.loads(capsys.readouterr().out)
        assert code == 0
        assert [entry["Index"] for entry in output["delta"]] == [10, 19, 20]

    def test_rejects_stale_version(self, capsys):
        code = main([
            "diff", "--content", BASELINE, "--file-version", "13",
            "--text", BASELINE, "--version", "13",
        ])

        assert code == 1
        assert "delta" not in capsys.readouterr().out

    def test_requires_text(self):
        assert main(["diff", "--content", BASELINE]) == 2

    def test_missing_text_file(self, tmp_path):
        code = main([
            "diff", "--content", BASELINE,
            "--text-file", str(tmp_path / "missing.txt"),
        ])

        assert code == 2


class TestServeCommand:
    """Tests for the serve command's startup checks."""

    def test_app_module_builds_nothing_on_import(self):
        import main as app_module

        assert not hasattr(app_module, "app")
        assert callable(app_module.create_app)

    def test_invalid_file_version_exits_before_serving(self, monkeypatch):
        import uvicorn

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append(args))

        code = main(["serve", "--content", BASELINE, "--file-version", "0"])

        assert code == 2
        assert calls == []

    def test_serves_configured_baseline(self, monkeypatch):
        import uvicorn

        served = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: served.append((app, kwargs)))

        code = main(["serve", "--content", BASELINE, "--file-version", "13", "--port", "9090"])

        assert code == 0
        app, kwargs = served[0]
        assert kwargs["port"] == 9090
        assert app.state.diff_finder.version() == 13
