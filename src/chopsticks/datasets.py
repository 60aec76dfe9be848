"""
Export of searched positions.

Every state reachable from a start position is searched to a fixed depth and
written as one CSV row, alongside a manifest recording how the export was made.
"""
from __future__ import annotations

import csv
import hashlib
import json
import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from .game_basics import INITIAL_POSITION, Position, Side, evaluate, serialize_position
from .moves import legal_moves
from .paths import git_commit
from .solver import reachable_positions, search, state_key
from .tactics import immediate_winning_moves

DATASET_VERSION = "1.0.0"
POSITIONS_CSV = "positions.csv"


@dataclass
class ExportArgs:
    out: Path
    depth: int = 6
    position: Position = field(default_factory=lambda: INITIAL_POSITION)
    mover: Side = Side.COMPUTER
    cli_argv: List[str] | None = None


def _schema_hash(rows: List[Dict[str, Any]]) -> str:
    keys = sorted({k for r in rows for k in r.keys()})
    payload = "\n".join(keys).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open('rb') as f:
        for chunk in iter(lambda: f.read(8192), b''):
            h.update(chunk)
    return h.hexdigest()


def position_row(position: Position, side: Side, depth: int) -> Dict[str, Any]:
    res = search(position, depth, side)
    best = res.move
    return {
        'state': state_key(position, side),
        'position': serialize_position(position),
        'to_move': side.value,
        'evaluation': evaluate(position),
        'terminal': int(evaluate(position) != 0),
        'n_moves': len(legal_moves(position, side)),
        'score': res.score,
        'best_source': best.source,
        'best_target': best.target,
        'best_action': best.action.value if best.action is not None else '',
        'winning_moves': ' '.join(
            f"{m.source}-{m.target}" for m in immediate_winning_moves(position, side)
        ),
    }


def run_export(args: ExportArgs) -> Path:
    if args.depth < 0:
        raise ValueError(f"Export depth must be non-negative, got {args.depth}")
    args.out.mkdir(parents=True, exist_ok=True)

    states = reachable_positions(args.position, args.mover)
    logging.info("Searching %d reachable states at depth %d…", len(states), args.depth)
    rows = [position_row(pos, side, args.depth) for pos, side in states]
    rows.sort(key=lambda r: r['state'])

    csv_path = args.out / POSITIONS_CSV
    fieldnames = list(rows[0].keys())
    with csv_path.open('w', newline='') as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow(r)
    logging.info("Wrote %s (%d rows)", csv_path, len(rows))

    score_split = Counter(r['score'] for r in rows)
    manifest = {
        "dataset_version": DATASET_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "args": {
            "depth": args.depth,
            "start": serialize_position(args.position),
            "mover": args.mover.value,
        },
        "cli_argv": args.cli_argv,
        "git_commit": git_commit(),
        "python_version": sys.version.split(" ")[0],
        "row_counts": {"positions": len(rows)},
        "score_split": {str(k): score_split.get(k, 0) for k in (-1, 0, 1)},
        "schema_hash": {"positions": _schema_hash(rows)},
        "files": {"positions_csv": str(csv_path)},
        "checksums": {"positions_csv": _sha256_file(csv_path)},
    }
    (args.out / "manifest.json").write_text(json.dumps(manifest, indent=2))
    logging.info("Wrote manifest.json")
    return args.out
