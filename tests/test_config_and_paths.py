from pathlib import Path

import pytest

from chopsticks.config import SolverConfig, load_config
from chopsticks.game_basics import INITIAL_POSITION, Position, Side
from chopsticks.paths import exports_dir, repo_root


def test_defaults_reproduce_the_reference_run():
    cfg = load_config({})
    assert cfg == SolverConfig()
    assert cfg.depth == 15
    assert cfg.mover is Side.COMPUTER
    assert cfg.position == INITIAL_POSITION


def test_environment_overrides():
    cfg = load_config({
        "CHOPSTICKS_DEPTH": "4",
        "CHOPSTICKS_EXPORT_DEPTH": "2",
        "CHOPSTICKS_MOVER": "p",
        "CHOPSTICKS_POSITION": "13|40",
        "CHOPSTICKS_LOG_LEVEL": "debug",
    })
    assert cfg.depth == 4
    assert cfg.export_depth == 2
    assert cfg.mover is Side.PLAYER
    assert cfg.position == Position((1, 3), (4, 0))
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"CHOPSTICKS_DEPTH": "deep"},
        {"CHOPSTICKS_DEPTH": "-1"},
        {"CHOPSTICKS_EXPORT_DEPTH": "1.5"},
        {"CHOPSTICKS_MOVER": "referee"},
        {"CHOPSTICKS_POSITION": "22100"},
        {"CHOPSTICKS_LOG_LEVEL": "LOUD"},
    ],
)
def test_malformed_overrides_name_the_variable(env):
    name = next(iter(env))
    with pytest.raises(ValueError, match=name):
        load_config(env)


def test_repo_root_falls_back_to_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("CHOPSTICKS_REPO_ROOT", raising=False)
    monkeypatch.delenv("CHOPSTICKS_EXPORTS", raising=False)
    monkeypatch.chdir(tmp_path)
    import chopsticks.paths as paths

    monkeypatch.setattr(paths, "_git_root", lambda start: None)
    assert repo_root() == tmp_path
    assert exports_dir() == tmp_path / "exports"


def test_paths_env_overrides(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("CHOPSTICKS_REPO_ROOT", str(tmp_path))
    monkeypatch.delenv("CHOPSTICKS_EXPORTS", raising=False)
    assert repo_root() == tmp_path
    assert exports_dir() == tmp_path / "exports"
    monkeypatch.setenv("CHOPSTICKS_EXPORTS", str(tmp_path / "elsewhere"))
    assert exports_dir() == tmp_path / "elsewhere"
