from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .config import SolverConfig, load_config
from .datasets import ExportArgs, run_export
from .game_basics import Position, Side, evaluate, parse_position, serialize_position
from .moves import legal_moves
from .paths import exports_dir
from .solver import search
from .tactics import immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="chopsticks", description="Chopsticks minimax solver")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--info", action="store_true", help="Print environment info and exit")

    def add_state_args(sp: argparse.ArgumentParser, required: bool = False) -> None:
        sp.add_argument(
            "--position",
            required=required,
            help="Four digits p0 p1 c0 c1, e.g. 2210 or 22|10",
        )
        sp.add_argument("--mover", help="Side to move: player or computer")

    p_best = sub.add_parser("best", help="Search the best move (defaults: 2210, depth 15, computer)")
    add_state_args(p_best)
    p_best.add_argument("--depth", type=int, default=None, help="Search depth in plies")
    p_best.add_argument(
        "--stdin", action="store_true", help="Read many positions from stdin and stream CSV output"
    )

    p_moves = sub.add_parser("moves", help="List legal moves for the side to move")
    add_state_args(p_moves, required=True)

    p_eval = sub.add_parser("evaluate", help="Print the utility of a position")
    p_eval.add_argument("--position", required=True, help="Four digits, e.g. 2210")

    p_tac = sub.add_parser("tactics", help="List immediate winning moves for the side to move")
    add_state_args(p_tac, required=True)

    p_export = sub.add_parser("export", help="Search every reachable state and export CSV + manifest")
    add_state_args(p_export)
    p_export.add_argument("--depth", type=int, default=None, help="Search depth per state")
    p_export.add_argument("--out", type=Path, default=None, help="Output directory (default: exports/)")

    return p


def _print_info() -> None:
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"chopsticks={_version()}")


def _version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("chopsticks")
    except PackageNotFoundError:
        return "unknown"


def _state(ns: argparse.Namespace, cfg: SolverConfig) -> tuple[Position, Side]:
    position = parse_position(ns.position) if ns.position else cfg.position
    mover = Side.parse(ns.mover) if getattr(ns, "mover", None) else cfg.mover
    return position, mover


def _depth(value: Optional[int], default: int) -> int:
    depth = default if value is None else value
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    return depth


def _format_best(score: int, cells: tuple[int, int]) -> str:
    return f"Best: ({score}, [{cells[0]}, {cells[1]}])"


def _stream_best(depth: int, mover: Side) -> int:
    import csv as _csv
    import sys as _sys

    w = _csv.writer(_sys.stdout)
    w.writerow(["position", "score", "source", "target", "action"])
    for line in _sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            position = parse_position(raw)
        except ValueError:
            logging.warning("Skipping invalid position: %r", raw)
            continue
        res = search(position, depth, mover)
        action = res.move.action.value if res.move.action is not None else ""
        w.writerow([serialize_position(position), res.score, res.move.source, res.move.target, action])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        cfg = load_config()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        logging.error("Invalid configuration: %s", e)
        return 2
    level = logging.DEBUG if getattr(ns, "verbose", False) else getattr(logging, cfg.log_level)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        print(_version())
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0
    if ns.cmd is None:
        parser.print_help()
        return 0

    try:
        if ns.cmd == "best":
            position, mover = _state(ns, cfg)
            depth = _depth(ns.depth, cfg.depth)
            if ns.stdin:
                return _stream_best(depth, mover)
            logging.info(
                "Searching %s with %s to move, depth %d",
                serialize_position(position), mover.value, depth,
            )
            res = search(position, depth, mover)
            print(_format_best(res.score, res.move.cells))
            return 0

        if ns.cmd == "moves":
            position, mover = _state(ns, cfg)
            for mv in legal_moves(position, mover):
                print(f"{mv.action.value} {mv.source}->{mv.target}")
            return 0

        if ns.cmd == "evaluate":
            print(evaluate(parse_position(ns.position)))
            return 0

        if ns.cmd == "tactics":
            position, mover = _state(ns, cfg)
            wins = immediate_winning_moves(position, mover)
            logging.info(
                "to_move=%s wins=%s",
                mover.value,
                [list(m.cells) for m in wins],
            )
            return 0

        if ns.cmd == "export":
            position, mover = _state(ns, cfg)
            depth = _depth(ns.depth, cfg.export_depth)
            out = run_export(ExportArgs(
                out=ns.out if ns.out is not None else exports_dir(),
                depth=depth,
                position=position,
                mover=mover,
                cli_argv=list(argv) if argv is not None else None,
            ))
            logging.info("Exported positions to: %s", out)
            return 0
    except ValueError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
