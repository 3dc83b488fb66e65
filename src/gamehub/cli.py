from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from .dictionary import DictionaryLoadError
from .manager import GameManager
from .simulate import SimulationArgs, run_simulation
from .tracking import maybe_mlflow_run
from .ui import ConsoleInput, InputSource, ScriptedInput
from .variants import VARIANTS, build_match, menu_text, variant_from_choice


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gamehub", description="Two-player grid games from the terminal")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for computer players and random board events")

    p_play = sub.add_parser("play", help="Play one match (shows a menu when --variant is omitted)")
    p_play.add_argument("--variant", choices=sorted(VARIANTS), help="Variant key, see 'gamehub list'")
    p_play.add_argument(
        "--script",
        type=Path,
        default=None,
        help="Read answers line by line from this file instead of the terminal",
    )

    sub.add_parser("list", help="List available variants")

    p_sim = sub.add_parser("simulate", help="Play computer-vs-computer games and export the results")
    p_sim.add_argument("--variant", required=True, choices=sorted(VARIANTS))
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    p_sim.add_argument(
        "--max-turns",
        type=int,
        default=200,
        help="Stop a game after this many turns and record it as unfinished (default: 200)",
    )
    p_sim.add_argument(
        "--out", type=Path, default=None, help="Output directory (default: $GAMEHUB_DATA_OUT or ./data_out)"
    )
    p_sim.add_argument(
        "--format",
        choices=["csv", "parquet", "both"],
        default="csv",
        help="Export format: csv (default), parquet, both",
    )
    p_sim.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_sim.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs/artifacts (for mlflow local backend)",
    )
    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "pandas", "pyarrow", "mlflow"]:
        if importlib.util.find_spec(pkg) is None:
            print(f"{pkg}=<not installed>")
        else:
            print(f"{pkg}={getattr(__import__(pkg), '__version__', '?')}")


def _print_version() -> None:
    from importlib.metadata import PackageNotFoundError, version

    try:
        print(version("gamehub"))
    except PackageNotFoundError:
        print("unknown")


def choose_variant(source: InputSource) -> str:
    while True:
        key = variant_from_choice(source.read(menu_text()))
        if key is not None:
            return key
        print("Invalid choice. Please pick a number from the menu.")


def play(variant: Optional[str], source: InputSource, seed: Optional[int]) -> int:
    key = variant or choose_variant(source)
    board, ui = build_match(key, source, np.random.default_rng(seed))
    print(ui.title)
    players = ui.setup_players()
    GameManager(board, players, ui).run()
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        _print_version()
        return 0
    if ns.info:
        _print_info()
        return 0

    if ns.cmd == "list":
        for key, spec in VARIANTS.items():
            print(f"{key:<10} {spec.name}")
        return 0

    if ns.cmd == "play":
        if ns.script is not None:
            try:
                source: InputSource = ScriptedInput(ns.script.read_text().splitlines())
            except OSError as e:
                logging.error("Cannot read script %s: %s", ns.script, e)
                return 2
        else:
            source = ConsoleInput()
        try:
            return play(ns.variant, source, ns.seed)
        except DictionaryLoadError as e:
            logging.error("%s", e)
            return 2
        except EOFError:
            logging.error("Input ended before the match finished")
            return 1
        except KeyboardInterrupt:
            print("\nGame interrupted.")
            return 130

    if ns.cmd == "simulate":
        if ns.games < 0:
            logging.error("--games must be non-negative: %s", ns.games)
            return 2
        if ns.max_turns <= 0:
            logging.error("--max-turns must be positive: %s", ns.max_turns)
            return 2
        args = SimulationArgs(
            variant=ns.variant,
            games=ns.games,
            seed=ns.seed,
            max_turns=ns.max_turns,
            format=ns.format,
            cli_argv=list(argv) if argv is not None else None,
        )
        if ns.out is not None:
            args.out = ns.out
        try:
            with maybe_mlflow_run(ns.tracking == "mlflow", run_name=f"simulate_{ns.variant}", log_dir=ns.log_dir):
                out = run_simulation(args)
        except (DictionaryLoadError, RuntimeError) as e:
            logging.error("%s", e)
            return 2
        logging.info("Wrote simulation results to: %s", out)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
