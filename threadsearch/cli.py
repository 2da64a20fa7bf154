#!filepath: threadsearch/cli.py
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from threadsearch import __version__
from threadsearch.config.app_config import AppConfig
from threadsearch.engines.oracle import SimpleOracle
from threadsearch.engines.threadcounts import ThreadCountEngine
from threadsearch.observability.metrics import MetricRecorder
from threadsearch.utils.errors import ThreadSearchError
from threadsearch.utils.logger import logs
from threadsearch.utils.table import Table

app = typer.Typer(help="Minimum thread-count search (grow / weaken / hack)")

ConfigOption = typer.Option(None, "--config", "-c", help="YAML config path")


def _load(config: Optional[str]) -> AppConfig:
    try:
        cfg = AppConfig.load(config)
    except FileNotFoundError as e:
        _fail(e)
    logs.configure(cfg.log)
    return cfg


def _engine(cfg: AppConfig, metrics: Optional[MetricRecorder] = None) -> ThreadCountEngine:
    return ThreadCountEngine(SimpleOracle(cfg.oracle), cfg.search, metrics)


def _fail(e: Exception):
    logs.error(f"[CLI] {type(e).__name__}: {e}")
    print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
    raise typer.Exit(code=1)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def grow(
    from_money: float,
    to_money: float,
    cores: int = typer.Option(1, "--cores", min=1),
    config: Optional[str] = ConfigOption,
):
    """
    Threads needed to grow FROM_MONEY up to TO_MONEY
    """
    cfg = _load(config)
    metrics = MetricRecorder()
    try:
        threads = _engine(cfg, metrics).min_threads_for_grow(from_money, to_money, None, None, cores)
    except ThreadSearchError as e:
        _fail(e)
    print(f"[green]grow[/green] {threads} threads ({metrics.get('grow.queries', 0)} oracle queries)")


@app.command()
def weaken(
    from_security: float,
    to_security: float,
    cores: int = typer.Option(1, "--cores", min=1),
    config: Optional[str] = ConfigOption,
):
    """
    Threads needed to weaken FROM_SECURITY down to TO_SECURITY
    """
    cfg = _load(config)
    metrics = MetricRecorder()
    try:
        threads = _engine(cfg, metrics).min_threads_for_weaken(from_security, to_security, cores)
    except ThreadSearchError as e:
        _fail(e)
    print(f"[blue]weaken[/blue] {threads} threads ({metrics.get('weaken.queries', 0)} oracle queries)")


@app.command()
def hack(
    from_money: float,
    to_money: float,
    config: Optional[str] = ConfigOption,
):
    """
    Threads needed to hack FROM_MONEY down to TO_MONEY
    """
    cfg = _load(config)
    try:
        threads = _engine(cfg).min_threads_for_hack(from_money, to_money, None, None)
    except ThreadSearchError as e:
        _fail(e)
    print(f"[yellow]hack[/yellow] {threads} threads")


@app.command()
def plan(
    from_money: float,
    to_money: float,
    from_security: float,
    to_security: float,
    max_cores: int = typer.Option(8, "--max-cores", min=1),
    config: Optional[str] = ConfigOption,
):
    """
    Grow / weaken / hack thread counts for 1, 2, 4, ... cores

    hack 列为从 TO_MONEY 回到 FROM_MONEY 所需线程数
    """
    cfg = _load(config)
    engine = _engine(cfg)

    table = Table()
    table.set_spacer(1, " | ").set_spacer(2, " | ").set_spacer(3, " | ")
    table.row().add("cores", ">").add("grow", ">").add("weaken", ">").add("hack", ">")

    try:
        hack_threads = engine.min_threads_for_hack(to_money, from_money, None, None)
        cores = 1
        while cores <= max_cores:
            table.row().add(cores, ">")
            table.add(engine.min_threads_for_grow(from_money, to_money, None, None, cores), ">")
            table.add(engine.min_threads_for_weaken(from_security, to_security, cores), ">")
            table.add(hack_threads, ">")
            cores *= 2
    except ThreadSearchError as e:
        _fail(e)

    table.end_if_started()
    table.write(print)


if __name__ == "__main__":
    app()

# python -m threadsearch.cli plan 1e6 5e7 45 10 --max-cores 8
