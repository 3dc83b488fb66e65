"""
Experiment tracking helpers (optional MLflow backend).

MLflow is imported only when tracking is requested, so it stays an optional extra.
Every helper degrades to a no-op when MLflow is missing or no run is active.
"""
from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional


def _mlflow() -> Optional[Any]:
    try:
        return importlib.import_module("mlflow")
    except ImportError:
        return None


@contextmanager
def maybe_mlflow_run(enabled: bool, run_name: str, log_dir: Optional[Path] = None) -> Iterator[bool]:
    """Wrap a block in an MLflow run when enabled; yields whether tracking is live."""
    mlflow = _mlflow() if enabled else None
    if enabled and mlflow is None:
        logging.warning("Tracking requested but mlflow is not installed; continuing without it")
    if mlflow is None:
        yield False
        return
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        mlflow.set_tracking_uri(log_dir.resolve().joinpath("mlruns").as_uri())
    with mlflow.start_run(run_name=run_name):
        yield True


def _active() -> Optional[Any]:
    mlflow = _mlflow()
    if mlflow is None or mlflow.active_run() is None:
        return None
    return mlflow


def log_params(params: Mapping[str, object]) -> None:
    mlflow = _active()
    if mlflow is not None:
        mlflow.log_params(dict(params))


def log_metrics(metrics: Dict[str, float]) -> None:
    mlflow = _active()
    if mlflow is not None:
        mlflow.log_metrics(metrics)


def log_artifact(path: Path, artifact_path: Optional[str] = None) -> None:
    mlflow = _active()
    if mlflow is not None:
        mlflow.log_artifact(str(path), artifact_path=artifact_path)
