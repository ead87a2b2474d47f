#!filepath: mlsamples/cli.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer
from rich import print

from mlsamples import __version__
from mlsamples.config.app_config import AppConfig
from mlsamples.utils.errors import SchemaError, UserInputError
from mlsamples.utils.logger import init_logging
from mlsamples.utils.path import PathManager

app = typer.Typer(help="ML tutorial programs")

_state: dict = {"cfg": None}


def _cfg() -> AppConfig:
    if _state["cfg"] is None:
        _state["cfg"] = AppConfig.load()
    return _state["cfg"]


def validate_trainers(cfg: AppConfig) -> None:
    from mlsamples.training.engines.registry import available_trainers

    known = available_trainers()
    for name, tutorial in cfg.tutorials:
        trainer = getattr(tutorial, "trainer", "")
        if trainer and trainer not in known:
            raise UserInputError(
                f"tutorials.{name}.trainer: unknown trainer '{trainer}'. "
                f"Available: {', '.join(known)}"
            )


def _run(title: str, fn: Callable[[], object]) -> object:
    print(f"[green]Running {title}[/green]")
    try:
        return fn()
    except (FileNotFoundError, SchemaError, UserInputError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


@app.callback()
def main(
    root: Optional[Path] = typer.Option(None, "--root", help="working root (default: current directory)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config path"),
):
    """
    Load config, point PathManager at the working root, configure logging.
    """
    try:
        cfg = AppConfig.load(str(config) if config else None)
        validate_trainers(cfg)
    except (FileNotFoundError, UserInputError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    PathManager.set_root(root if root is not None else cfg.data.root)
    init_logging(cfg.log.model_copy(update={"dir": str(PathManager.resolve(cfg.log.dir))}))
    _state["cfg"] = cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command("hello-ml")
def hello_ml():
    """HelloML: house price regression on in-memory data."""
    from mlsamples.workflows.hello_ml import run_hello_ml

    _run("HelloML", lambda: run_hello_ml(_cfg().tutorials.hello_ml))


@app.command()
def sentiment():
    """Binary sentiment classification (yelp reviews)."""
    from mlsamples.workflows.sentiment_analysis import run_sentiment

    _run("sentiment analysis", lambda: run_sentiment(_cfg().tutorials.sentiment))


@app.command()
def issues():
    """Multiclass GitHub issue classification."""
    from mlsamples.workflows.issue_classification import run_issue_classification

    _run("issue classification", lambda: run_issue_classification(_cfg().tutorials.issues))


@app.command("taxi-fare")
def taxi_fare():
    """Taxi fare regression."""
    from mlsamples.workflows.taxi_fare_regression import run_taxi_fare

    _run("taxi fare regression", lambda: run_taxi_fare(_cfg().tutorials.taxi_fare))


@app.command()
def iris():
    """K-means clustering of iris flowers."""
    from mlsamples.workflows.iris_clustering import run_iris_clustering

    _run("iris clustering", lambda: run_iris_clustering(_cfg().tutorials.iris))


@app.command("movie-recommendation")
def movie_recommendation():
    """Matrix factorisation movie recommendation."""
    from mlsamples.workflows.movie_recommendation import run_movie_recommendation

    _run("movie recommendation", lambda: run_movie_recommendation(_cfg().tutorials.movies))


@app.command("sales-anomaly")
def sales_anomaly():
    """Spike and change-point detection on product sales."""
    from mlsamples.workflows.sales_anomaly_detection import run_sales_anomaly

    _run("sales anomaly detection", lambda: run_sales_anomaly(_cfg().tutorials.sales_anomaly))


@app.command("object-detection")
def object_detection():
    """Tiny YOLOv2 object detection."""
    from mlsamples.workflows.object_detection import run_object_detection

    ctx = _run("object detection", lambda: run_object_detection(_cfg().tutorials.object_detection))
    if ctx is None:
        raise typer.Exit(code=1)


@app.command("transfer-learning")
def transfer_learning():
    """Image classification by transfer learning on Inception features."""
    from mlsamples.workflows.image_transfer_learning import run_transfer_learning

    _run("image transfer learning", lambda: run_transfer_learning(_cfg().tutorials.transfer_learning))


@app.command("game-match")
def game_match():
    """Player skill ranking from head-to-head game results."""
    from mlsamples.workflows.game_match import run_game_match

    _run("game match", lambda: run_game_match(_cfg().tutorials.game_match))


@app.command()
def serve():
    """
    Serve the sentiment prediction API.
    """
    from mlsamples.api.app import create_app

    cfg = _cfg()
    print(f"[blue]Serving on {cfg.api.host}:{cfg.api.port}[/blue]")
    create_app(cfg).run(host=cfg.api.host, port=cfg.api.port)


if __name__ == "__main__":
    app()

# python -m mlsamples.cli --root . hello-ml
