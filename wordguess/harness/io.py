"""
I/O utilities for self-play runs.

- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config and word list metadata.
- timestamp_id:   stable UTC run ID string.

Patterns are prefixed with an apostrophe to keep spreadsheet apps from
interpreting strings like "-GYY-" as formulas.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, List
import csv
import json

from wordguess.config import MAX_ATTEMPTS


def _excel_safe_pattern(patt: str) -> str:
    """Example: "-GYY-" -> "'-GYY-" """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: Path | str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_6, patt_6

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, MAX_ATTEMPTS + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, MAX_ATTEMPTS + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: Path | str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id
      - config: CLI args (solver, paths, seed, sample, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - num_cases, wins, mean_guesses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
