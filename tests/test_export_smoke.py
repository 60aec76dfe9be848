import csv
import json
from pathlib import Path

import pytest

from chopsticks.datasets import ExportArgs, run_export
from chopsticks.game_basics import Position, Side
from chopsticks.solver import reachable_positions


def test_export_creates_csv_and_manifest(tmp_path: Path):
    res = run_export(ExportArgs(out=tmp_path / "exp", depth=2))
    assert (res / "positions.csv").exists()
    data = json.loads((res / "manifest.json").read_text())
    assert data["dataset_version"]
    assert data["args"] == {"depth": 2, "start": "2210", "mover": "computer"}
    assert data["row_counts"]["positions"] == len(reachable_positions())
    assert sum(data["score_split"].values()) == data["row_counts"]["positions"]


def test_export_rows(tmp_path: Path):
    res = run_export(ExportArgs(out=tmp_path, depth=2))
    with (res / "positions.csv").open(newline="") as f:
        rows = list(csv.DictReader(f))
    states = [r["state"] for r in rows]
    assert states == sorted(states)
    assert len(states) == len(set(states))
    start = next(r for r in rows if r["state"] == "2210C")
    assert start["score"] == "0"
    assert (start["best_source"], start["best_target"], start["best_action"]) == ("2", "0", "attack")
    assert start["n_moves"] == "2"
    for r in rows:
        if r["terminal"] == "1":
            assert r["n_moves"] == "0"
            assert r["best_action"] == ""


def test_export_from_a_custom_start(tmp_path: Path):
    res = run_export(ExportArgs(out=tmp_path, depth=1, position=Position((4, 0), (1, 0)),
                                mover=Side.PLAYER))
    with (res / "positions.csv").open(newline="") as f:
        rows = {r["state"]: r for r in csv.DictReader(f)}
    assert rows["4010P"]["score"] == "1"
    assert rows["4010P"]["winning_moves"] == "0-2"
    assert rows["4000C"]["terminal"] == "1"


def test_run_export_reproducible(tmp_path: Path):
    out1 = run_export(ExportArgs(out=tmp_path / "a", depth=2))
    out2 = run_export(ExportArgs(out=tmp_path / "b", depth=2))
    assert (out1 / "positions.csv").read_bytes() == (out2 / "positions.csv").read_bytes()
    m1 = json.loads((out1 / "manifest.json").read_text())
    m2 = json.loads((out2 / "manifest.json").read_text())
    assert m1["schema_hash"] == m2["schema_hash"]
    assert m1["checksums"] == m2["checksums"]


def test_negative_depth_writes_nothing(tmp_path: Path):
    out = tmp_path / "never"
    with pytest.raises(ValueError):
        run_export(ExportArgs(out=out, depth=-1))
    assert not out.exists()
