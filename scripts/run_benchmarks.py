#!/usr/bin/env python3
"""Time the plain minimax on the reference position at increasing depths."""
from __future__ import annotations

import argparse
import math
import statistics as stats
import time
from typing import List, Tuple

from chopsticks.game_basics import INITIAL_POSITION, Side
from chopsticks.solver import search


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    half = 1.96 * (s / math.sqrt(len(values)))
    return m, half


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark chopsticks search depth by depth")
    ap.add_argument("--max-depth", type=int, default=9)
    ap.add_argument("--repeats", type=int, default=5)
    ns = ap.parse_args(argv)
    for depth in range(1, ns.max_depth + 1):
        times: List[float] = []
        for _ in range(ns.repeats):
            t0 = time.perf_counter()
            res = search(INITIAL_POSITION, depth, Side.COMPUTER)
            times.append(time.perf_counter() - t0)
        m, h = ci95(times)
        print(f"depth={depth:2d} score={res.score:+d} move={list(res.move.cells)} "
              f"mean={m:.4f}s ± {h:.4f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
