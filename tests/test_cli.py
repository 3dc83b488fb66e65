import subprocess
import sys
from pathlib import Path

import pytest

from gamehub.cli import main


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "gamehub.cli"]
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True)


def test_cli_list_shows_every_variant(tmp_path: Path):
    r = _run_cli(["list"], cwd=tmp_path)
    assert r.returncode == 0
    for key in ("classic", "ultimate", "sliding", "connect4", "word"):
        assert key in r.stdout


def test_cli_play_scripted_classic(tmp_path: Path):
    script = tmp_path / "moves.txt"
    script.write_text("\n".join(["Ann", "1", "Bob", "1", "0 0", "1 0", "0 1", "1 1", "0 2"]) + "\n")
    r = _run_cli(["play", "--variant", "classic", "--script", str(script)], cwd=tmp_path)
    assert r.returncode == 0, r.stderr
    assert "Ann wins!" in r.stdout


def test_cli_play_from_menu_with_computers(tmp_path: Path):
    stdin = "\n".join(["1", "A", "2", "B", "2"]) + "\n"
    r = _run_cli(["--seed", "3", "play"], cwd=tmp_path, stdin=stdin)
    assert r.returncode == 0, r.stderr
    assert "Choose a game:" in r.stdout
    assert "wins!" in r.stdout or "Draw!" in r.stdout


def test_cli_play_input_ends_early(tmp_path: Path):
    script = tmp_path / "short.txt"
    script.write_text("Ann\n1\n")
    r = _run_cli(["play", "--variant", "classic", "--script", str(script)], cwd=tmp_path)
    assert r.returncode == 1
    assert "Input ended" in r.stderr


def test_cli_missing_dictionary_exits_2(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GAMEHUB_DICTIONARY", str(tmp_path / "missing.txt"))
    assert main(["play", "--variant", "word", "--script", str(tmp_path / "none.txt")]) == 2
    script = tmp_path / "s.txt"
    script.write_text("A\n1\nB\n1\n")
    assert main(["play", "--variant", "word", "--script", str(script)]) == 2


def test_cli_unknown_variant_rejected(tmp_path: Path):
    r = _run_cli(["play", "--variant", "chess"], cwd=tmp_path)
    assert r.returncode != 0


def test_cli_simulate_writes_results(tmp_path: Path):
    out = tmp_path / "sim"
    r = _run_cli(["--seed", "11", "simulate", "--variant", "classic", "--games", "5", "--out", str(out)], cwd=tmp_path)
    assert r.returncode == 0, r.stderr
    assert (out / "results.csv").exists()
    assert (out / "manifest.json").exists()


def test_cli_simulate_rejects_negative_games(tmp_path: Path):
    assert main(["simulate", "--variant", "classic", "--games", "-1", "--out", str(tmp_path)]) == 2


def test_cli_version_and_info(capsys):
    assert main(["--version"]) == 0
    assert main(["--info"]) == 0
    out = capsys.readouterr().out
    assert "python=" in out
    assert "numpy=" in out
