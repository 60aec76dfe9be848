#!/usr/bin/env python3
"""
Verify a chopsticks position export directory.

Checks performed:
- manifest.json exists and is parseable
- the positions CSV listed in the manifest exists and matches its SHA-256
- the CSV row count matches manifest.row_counts.positions
- schema_hash matches the sorted CSV header

Exit codes:
 0 on success, 1 on a failed check, 2 when the manifest is missing or unreadable.
"""
from __future__ import annotations

import argparse
import csv
import hashlib
import json
import sys
from pathlib import Path


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open('rb') as f:
        for chunk in iter(lambda: f.read(8192), b''):
            h.update(chunk)
    return h.hexdigest()


def read_csv(path: Path) -> tuple[list[str], int]:
    with path.open('r', newline='') as f:
        reader = csv.reader(f)
        header = next(reader)
        return header, sum(1 for _ in reader)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Verify chopsticks position export")
    ap.add_argument("out", type=Path, help="Export directory (contains manifest.json)")
    ns = ap.parse_args(argv)
    manifest_path = ns.out / "manifest.json"
    try:
        manifest = json.loads(manifest_path.read_text())
    except (OSError, ValueError) as e:
        print(f"ERROR: cannot read manifest {manifest_path}: {e}", file=sys.stderr)
        return 2

    ok = True
    csv_path = Path(manifest.get("files", {}).get("positions_csv") or ns.out / "positions.csv")
    if not csv_path.exists():
        print(f"ERROR: missing positions CSV: {csv_path}", file=sys.stderr)
        return 1

    want = manifest.get("checksums", {}).get("positions_csv")
    have = sha256_file(csv_path)
    if want != have:
        print(f"ERROR: checksum mismatch: manifest={want} computed={have}", file=sys.stderr)
        ok = False

    header, n = read_csv(csv_path)
    expected_rows = manifest.get("row_counts", {}).get("positions")
    if expected_rows != n:
        print(f"ERROR: row count mismatch: manifest={expected_rows} actual={n}", file=sys.stderr)
        ok = False

    schema = hashlib.sha256("\n".join(sorted(header)).encode("utf-8")).hexdigest()
    if manifest.get("schema_hash", {}).get("positions") != schema:
        print("ERROR: schema_hash mismatch with CSV header", file=sys.stderr)
        ok = False

    if not ok:
        return 1
    print("OK: export verified")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
