from pathlib import Path

from gamehub.paths import data_out, dictionary_path, repo_root


def test_repo_root_prefers_cwd_when_no_git_and_no_env(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("GAMEHUB_REPO_ROOT", raising=False)
    monkeypatch.delenv("GAMEHUB_DATA_OUT", raising=False)
    monkeypatch.chdir(tmp_path)
    import gamehub.paths as P

    monkeypatch.setattr(P, "_find_git_root", lambda start: None)

    assert repo_root() == tmp_path
    assert data_out() == tmp_path / "data_out"


def test_env_overrides(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GAMEHUB_REPO_ROOT", str(tmp_path / "root"))
    monkeypatch.setenv("GAMEHUB_DATA_OUT", str(tmp_path / "out"))
    assert repo_root() == tmp_path / "root"
    assert data_out() == tmp_path / "out"


def test_dictionary_in_cwd_preferred_over_packaged(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("GAMEHUB_DICTIONARY", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "dic.txt").write_text("abc\n")
    assert dictionary_path() == tmp_path / "dic.txt"
