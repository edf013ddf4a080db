from __future__ import annotations

import io
import json

import pytest

from flashcard_study import cli
from flashcard_study.card import Card
from flashcard_study.cli import HELP_TEXT, NO_CARD_TEXT, main, run_session
from flashcard_study.manager import CardsManager


@pytest.fixture
def deck_csv(tmp_path):
    p = tmp_path / "deck.csv"
    p.write_text("front,back,hint\na,b,c\nd,e,\n", encoding="utf-8")
    return p


class TestRunSession:
    def test_commands_drive_manager(self):
        manager = CardsManager([Card("a", "b", "c"), Card("d", "e")])
        out = io.StringIO()

        applied = run_session(manager, ["n", "f", "h", "n", "h", "p", "r", "q", "n"], out)

        assert applied == 7
        lines = out.getvalue().splitlines()
        faces = lines[0::2]
        assert faces == ["a", "b", "c", "d", "d", "c", "a"]
        assert lines[-1] == "seen=1 unseen=1"

    def test_unknown_command_prints_help(self):
        manager: CardsManager[Card] = CardsManager()
        out = io.StringIO()
        assert run_session(manager, ["x", "", "c"], out) == 1
        assert out.getvalue().splitlines() == [HELP_TEXT, NO_CARD_TEXT, "seen=0 unseen=0"]


class TestMain:
    def test_show(self, deck_csv, capsys):
        assert main(["show", "--deck", str(deck_csv)]) == 0
        assert capsys.readouterr().out.strip() == "a, d"

    def test_study_over_stdin(self, deck_csv, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("n\nf\nq\n"))
        assert main(["study", "--deck", str(deck_csv)]) == 0
        out = capsys.readouterr().out
        assert "seen=1 unseen=1" in out
        assert out.splitlines()[-2] == "b"

    def test_study_with_config_shuffle(self, deck_csv, tmp_path, capsys, monkeypatch):
        cfg = tmp_path / "cfg.json"
        cfg.write_text(json.dumps({"shuffle": True, "seed": 1, "log_level": "WARNING"}), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", io.StringIO("n\nn\nn\n"))

        assert main(["--config", str(cfg), "study", "--deck", str(deck_csv)]) == 0
        out = capsys.readouterr().out
        assert "seen=2 unseen=0" in out

    def test_load_failure(self, tmp_path, capsys):
        bad = tmp_path / "bad.csv"
        bad.write_text("question,answer\nq,a\n", encoding="utf-8")
        assert main(["show", "--deck", str(bad)]) == 1
        assert capsys.readouterr().out.startswith("load_failed:")

    def test_missing_file(self, tmp_path, capsys):
        assert main(["study", "--deck", str(tmp_path / "nope.csv")]) == 1
        assert "load_failed" in capsys.readouterr().out


class TestConfigAndLogging:
    @pytest.fixture
    def levels(self, monkeypatch):
        seen = []
        monkeypatch.setattr(cli, "setup_logging", seen.append)
        return seen

    def test_log_level_env_reaches_setup(self, deck_csv, tmp_path, monkeypatch, levels):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert main(["show", "--deck", str(deck_csv)]) == 0
        # No config level: setup_logging falls back to LOG_LEVEL.
        assert levels == [None]

    def test_default_config_path_is_loaded(self, deck_csv, tmp_path, monkeypatch, levels):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "default.json").write_text(json.dumps({"log_level": "error"}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main(["show", "--deck", str(deck_csv)]) == 0
        assert levels == ["ERROR"]

    def test_explicit_missing_config_fails(self, deck_csv, tmp_path, capsys, levels):
        assert main(["--config", str(tmp_path / "missing.json"), "show", "--deck", str(deck_csv)]) == 1
        assert capsys.readouterr().out.startswith("config_failed:")
        assert levels == []
