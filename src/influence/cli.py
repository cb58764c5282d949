from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from influence import config
from influence.datasets import DEMO_NETWORKS
from influence.domain.models import NetworkSpec, ScoreReport, load_network
from influence.errors import InfluenceError
from influence.graph.paths import UNREACHABLE
from influence.graph.score import closeness_score

app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

# menu choice -> demo network name
MENU_OPTIONS = {
    "1": "weighted",
    "2": "unweighted",
}


@app.callback()
def _setup(
    log_level: Optional[str] = typer.Option(
        None, help="Logging level: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFLUENCE_LOG_LEVEL)"
    ),
) -> None:
    level = (log_level or config.LOG_LEVEL).upper().strip()
    if level not in config.LOG_LEVELS:
        raise typer.BadParameter(
            f"log level must be one of: {', '.join(config.LOG_LEVELS)}", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fmt(value: float) -> str:
    return f"{value:.{config.SCORE_PRECISION}f}"


def _load_spec(path: str) -> NetworkSpec:
    p = Path(path).expanduser()
    if not p.exists():
        raise typer.BadParameter(f"Network file does not exist: {p}")
    if not p.is_file():
        raise typer.BadParameter(f"Network file is not a file: {p}")
    try:
        return load_network(p)
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid network file {p}:\n{e}")


def _resolve(file: Optional[str], demo: Optional[str]) -> NetworkSpec:
    if file and demo:
        raise typer.BadParameter("give either a network file or --demo, not both")
    if demo:
        if demo not in DEMO_NETWORKS:
            raise typer.BadParameter(f"--demo must be one of: {', '.join(DEMO_NETWORKS)}")
        return DEMO_NETWORKS[demo]
    if not file:
        raise typer.BadParameter("a network file or --demo is required")
    return _load_spec(file)


def build_report(spec: NetworkSpec, source=None) -> ScoreReport:
    source = spec.source if source is None else source
    if source is None:
        raise typer.BadParameter("no source node: pass --source or set 'source' in the file")

    g = spec.build_graph()
    distances = g.shortest_distances(source)
    score = closeness_score(source, distances, len(g))
    logger.info("influence score for %r: %s", source, score)
    return ScoreReport(
        network=spec.name,
        source=source,
        weighted=g.weighted,
        node_count=len(g),
        score=score,
        distances={str(k): v for k, v in distances.items()},
    )


def _run_demo(name: str) -> None:
    spec = DEMO_NETWORKS[name]
    console.print("")
    console.print(f"Running {name} network")
    try:
        report = build_report(spec)
    except InfluenceError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    console.print(f"Influence score for {escape(str(report.source))}: {_fmt(report.score)}")


@app.command()
def menu() -> None:
    """Interactive menu: pick one of the two demo networks."""
    console.print("[bold]Influence Score Calculator[/bold]")
    console.print("1. Run weighted network")
    console.print("2. Run unweighted network")
    choice = console.input("Choose an option: ").strip()

    name = MENU_OPTIONS.get(choice)
    if name is None:
        console.print("Invalid selection.")
        return
    _run_demo(name)


@app.command()
def demo(
    name: str = typer.Argument(..., help="Demo network: weighted|unweighted"),
) -> None:
    key = name.lower().strip()
    if key not in DEMO_NETWORKS:
        raise typer.BadParameter(f"name must be one of: {', '.join(DEMO_NETWORKS)}")
    _run_demo(key)


@app.command()
def score(
    file: str = typer.Argument(..., help="Path to a JSON network file"),
    source: Optional[str] = typer.Option(None, help="Source node (default: the file's 'source')"),
    format: str = typer.Option("text", help="Output format: text|json"),
) -> None:
    fmt = format.lower().strip()
    if fmt not in ("text", "json"):
        raise typer.BadParameter("format must be one of: text, json")

    spec = _load_spec(file)
    try:
        report = build_report(spec, source)
    except InfluenceError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if fmt == "json":
        console.print_json(report.model_dump_json())
        return

    mode = "weighted" if report.weighted else "unweighted"
    console.print(f"[bold]Network:[/bold] {escape(report.network)} ({mode}, {report.node_count} nodes)")
    console.print(f"Influence score for {escape(str(report.source))}: {_fmt(report.score)}")


@app.command()
def distances(
    file: Optional[str] = typer.Argument(None, help="Path to a JSON network file"),
    demo: Optional[str] = typer.Option(None, help="Use a demo network instead: weighted|unweighted"),
    source: Optional[str] = typer.Option(None, help="Source node (default: the network's 'source')"),
) -> None:
    spec = _resolve(file, demo)
    src = spec.source if source is None else source
    if src is None:
        raise typer.BadParameter("no source node: pass --source or set 'source' in the file")

    try:
        dist = spec.build_graph().shortest_distances(src)
    except InfluenceError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(show_header=True, header_style="bold")
    table.add_column("NODE")
    table.add_column("DISTANCE", justify="right", no_wrap=True)

    # reachable nodes by distance, unreachable last
    rows = sorted(dist.items(), key=lambda kv: (kv[1] is UNREACHABLE, kv[1] or 0, str(kv[0])))
    for node, d in rows:
        table.add_row(escape(str(node)), "unreachable" if d is UNREACHABLE else f"{d:g}")

    console.print(f"[bold]Distances from[/bold] {escape(str(src))}")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
