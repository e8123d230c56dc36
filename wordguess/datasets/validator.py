"""
Dataset validator for the game's word lists.

What this module does:
- Validate a pair of word lists: answers (candidate secrets) and allowed
  (extra accepted guesses).
- Enforce formatting rules (first token of each line is the word; lowercase
  a–z only; exactly WORD_LENGTH letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report how many answers also appear in allowed and the size of the
  resulting dictionary (answers ∪ allowed).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordguess.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("answers_5.txt", "allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordguess.config import WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, allowed) pair."""
    word_length: int
    answers: FileReport
    allowed: FileReport
    overlap: int          # answers that are also listed in allowed
    dictionary_size: int  # |answers ∪ allowed|
    passed: bool
    issues: List[str]     # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - the word is the first whitespace-separated token of the line
      - must be lowercase a–z
      - must have exactly WORD_LENGTH letters
      - empty/whitespace-only lines are skipped, not counted as invalid

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            tokens = raw.split()
            if not tokens:
                continue
            w = tokens[0]
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: Path | str, allowed_path: Path | str) -> Dict:
    """
    Validate the answers/allowed word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - overlap between the lists and the merged dictionary size
          - `passed` boolean (strict: answers non-empty, no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    all_p = Path(allowed_path)

    # Early return if either file is missing
    if not ans_p.exists() or not all_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            word_length=WORD_LENGTH,
            answers=FileReport(str(ans_p), ans_p.exists(), 0, "", 0, 0),
            allowed=FileReport(str(all_p), all_p.exists(), 0, "", 0, 0),
            overlap=0,
            dictionary_size=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    answers, ans_invalid = _load_and_check(ans_p)
    allowed, all_invalid = _load_and_check(all_p)
    ans_report = _file_report(ans_p, answers, ans_invalid)
    all_report = _file_report(all_p, allowed, all_invalid)

    answers_set = set(answers)
    allowed_set = set(allowed)

    # Empty answers means no game can start at all; empty allowed is only a warning sign.
    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")
    if all_report.count == 0:
        issues.append("allowed file contains 0 valid words")

    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid line(s)")
    if all_invalid:
        issues.append(f"allowed has {all_invalid} invalid line(s)")

    if ans_report.count != ans_report.unique_count:
        issues.append("answers contains duplicate lines")
    if all_report.count != all_report.unique_count:
        issues.append("allowed contains duplicate lines")

    passed = ans_report.count > 0 and ans_invalid == 0 and all_invalid == 0

    rep = ValidationReport(
        word_length=WORD_LENGTH,
        answers=ans_report,
        allowed=all_report,
        overlap=len(answers_set & allowed_set),
        dictionary_size=len(answers_set | allowed_set),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        answers=120 (uniq=120, sha=abc123...) | allowed=310 (uniq=310, sha=def456...) | dictionary=430 | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| dictionary={report['dictionary_size']} | {status}"
    )
