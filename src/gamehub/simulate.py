"""
Computer-vs-computer simulations of any variant, exported for analysis.

Each game gets its own seed drawn from one SeedSequence, so a run is reproducible
game by game. Results are written as a deterministic CSV (optionally Parquet) plus a
manifest.json with provenance: arguments, outcome counts, versions and checksums.
"""
from __future__ import annotations

import csv
import hashlib
import importlib.util
import json
import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

import numpy as np

from .dictionary import load_words
from .game_basics import PlayerType
from .manager import GameManager, MatchResult
from .paths import data_out, get_git_commit
from .tracking import log_artifact, log_metrics, log_params
from .ui import ScriptedInput
from .variants import build_match, get_variant

RESULTS_VERSION = "1.0.0"
FIELDNAMES = ["game", "variant", "seed", "outcome", "winner", "winner_symbol", "turns", "rejected"]


@dataclass
class SimulationArgs:
    variant: str
    games: int = 100
    seed: Optional[int] = None
    max_turns: Optional[int] = 200
    out: Path = field(default_factory=data_out)
    format: str = "csv"  # one of: "csv", "parquet", "both"
    words: Optional[FrozenSet[str]] = None
    cli_argv: Optional[List[str]] = None


def play_computer_match(
    variant: str,
    rng: np.random.Generator,
    words: Optional[FrozenSet[str]] = None,
    max_turns: Optional[int] = None,
) -> MatchResult:
    """One silent match between two computer players."""
    board, ui = build_match(variant, ScriptedInput([]), rng, words, quiet=True)
    players = ui.build_players(["Computer 1", "Computer 2"], [PlayerType.COMPUTER] * 2)
    return GameManager(board, players, ui).run(max_turns)


def game_seeds(seed: Optional[int], games: int) -> List[int]:
    return [int(s) for s in np.random.SeedSequence(seed).generate_state(games)]


def simulate_games(args: SimulationArgs) -> List[Dict[str, Any]]:
    get_variant(args.variant)
    if args.games < 0:
        raise ValueError(f"games must be non-negative, got {args.games}")
    words = args.words
    if args.variant == "word" and words is None:
        words = load_words()
    rows: List[Dict[str, Any]] = []
    for i, s in enumerate(game_seeds(args.seed, args.games)):
        result = play_computer_match(args.variant, np.random.default_rng(s), words, args.max_turns)
        winner = result.winner
        rows.append({
            "game": i,
            "variant": args.variant,
            "seed": s,
            "outcome": result.outcome.value,
            "winner": winner.get_name() if winner is not None else "",
            "winner_symbol": winner.get_symbol() if winner is not None else "",
            "turns": result.turns,
            "rejected": result.rejected,
        })
    return rows


def summarize(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    outcomes = Counter(r["outcome"] for r in rows)
    winners = Counter(r["winner"] for r in rows if r["winner"])
    turns = [r["turns"] for r in rows]
    return {
        "games": len(rows),
        "outcomes": dict(sorted(outcomes.items())),
        "winners": dict(sorted(winners.items())),
        "mean_turns": float(np.mean(turns)) if turns else 0.0,
    }


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _package_versions() -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for pkg in ["numpy", "pandas", "pyarrow"]:
        if importlib.util.find_spec(pkg) is None:
            continue
        ver = getattr(__import__(pkg), "__version__", None)
        if ver:
            versions[pkg] = ver
    return versions


def _write_csv(path: Path, rows: List[Dict[str, Any]]) -> None:
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        for r in sorted(rows, key=lambda r: r["game"]):
            w.writerow(r)


def run_simulation(args: SimulationArgs) -> Path:
    fmt = (args.format or "csv").lower()
    if fmt not in {"csv", "parquet", "both"}:
        raise ValueError(f"Unknown export format: {args.format}")
    have_parquet = (
        importlib.util.find_spec("pandas") is not None
        and importlib.util.find_spec("pyarrow") is not None
    )
    if not have_parquet and fmt == "parquet":
        raise RuntimeError(
            "Parquet dependencies not available (install pandas and pyarrow). "
            "Use pip install .[parquet] to enable parquet support."
        )

    logging.info("Simulating %d %s games (seed=%s)", args.games, args.variant, args.seed)
    rows = simulate_games(args)
    summary = summarize(rows)
    logging.info("Outcomes: %s", summary["outcomes"])

    args.out.mkdir(parents=True, exist_ok=True)
    results_csv = args.out / "results.csv"
    results_parquet = args.out / "results.parquet"
    wrote_csv = False
    wrote_parquet = False

    if fmt in {"csv", "both"}:
        _write_csv(results_csv, rows)
        wrote_csv = True
        logging.info("Wrote %s (%d rows)", results_csv, len(rows))

    if fmt in {"parquet", "both"}:
        if have_parquet:
            import pandas as pd

            pd.DataFrame(rows, columns=FIELDNAMES).to_parquet(results_parquet)
            wrote_parquet = True
            logging.info("Wrote %s", results_parquet)
        else:
            logging.warning(
                "Parquet dependencies not available; proceeding with CSV only, "
                "manifest will record parquet_written=false."
            )

    files = {
        "results_csv": results_csv if wrote_csv else None,
        "results_parquet": results_parquet if wrote_parquet else None,
    }
    manifest = {
        "results_version": RESULTS_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "args": {
            "variant": args.variant,
            "games": args.games,
            "seed": args.seed,
            "max_turns": args.max_turns,
            "format": fmt,
        },
        "summary": summary,
        "git_commit": get_git_commit(),
        "python": {"python_version": sys.version.split(" ")[0], "packages": _package_versions()},
        "cli_argv": args.cli_argv,
        "files": {k: str(p) if p is not None else None for k, p in files.items()},
        "checksums": {k: _sha256_file(p) for k, p in files.items() if p is not None},
        "parquet_written": wrote_parquet,
    }
    manifest_path = args.out / "manifest.json"
    manifest_path.write_text(json.dumps(manifest, indent=2))
    logging.info("Wrote manifest.json")

    log_params({"variant": args.variant, "games": args.games, "seed": args.seed, "format": fmt})
    log_metrics({k: float(v) for k, v in summary["outcomes"].items()})
    log_artifact(manifest_path)
    for p in files.values():
        if p is not None:
            log_artifact(p)
    return args.out
