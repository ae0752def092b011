"""CLI entrypoints for content graph tooling."""

import logging
import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import Config, load_config
from .ingest import ContentLoadError, load_graph
from .reporting import assemble_report, write_report
from .store import GraphStore, write_graph
from .verify import VerificationReport, verify_graph

console = Console()
app = typer.Typer(help="Build a linked node graph from content JSON files.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file."),
]
ProjectOption = Annotated[
    Path | None,
    typer.Option("--project", "-p", help="Project directory holding contentgraph.yml."),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log every file as it is mapped."),
]


@app.command()
def build(
    config_path: ConfigPathOption = "contentgraph.yml",
    project: ProjectOption = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Override the configured output directory."),
    ] = None,
    verbose: VerboseFlag = False,
) -> None:
    """Map every content file into nodes and write the graph."""
    _configure_logging(verbose)
    config = _load(project if project is not None else config_path)
    if output_dir is not None:
        base = project.resolve() if project is not None else Path.cwd()
        config.output_dir = output_dir if output_dir.is_absolute() else (base / output_dir).resolve()

    start = time.perf_counter()
    store = _load_graph(config)
    node_paths = write_graph(store, config.output_dir / "nodes")
    verification = verify_graph(store)
    report = assemble_report(
        project=config.project_name,
        duration_seconds=time.perf_counter() - start,
        store=store,
        verification=verification,
    )
    report_path = write_report(report, config.output_dir)

    console.print(
        f"[bold green]Graph built[/]: {report.total_nodes} node(s) across "
        f"{len(node_paths)} file(s) in {config.output_dir}."
    )
    for node_type, count in report.nodes.items():
        console.print(f"  {node_type}: {count}")
    if verification.issues:
        console.print(
            f"[bold yellow]Warning[/]: {len(verification.issues)} dangling reference(s); "
            "run 'verify' for details."
        )
    console.print(f"[bold blue]Report[/]: {report_path}")


@app.command()
def verify(
    config_path: ConfigPathOption = "contentgraph.yml",
    project: ProjectOption = None,
    verbose: VerboseFlag = False,
) -> None:
    """Check that every cross-reference in the graph resolves to a node."""
    _configure_logging(verbose)
    config = _load(project if project is not None else config_path)
    store = _load_graph(config)
    report = verify_graph(store)
    _print_verification(report)
    raise typer.Exit(code=0 if report.ok else 1)


def _print_verification(report: VerificationReport) -> None:
    if report.ok:
        console.print(
            f"[bold green]Graph verified[/]: {report.checked_references} reference(s) "
            f"across {report.checked_nodes} node(s) resolve."
        )
        return

    for issue in report.issues:
        console.print(f"[bold red]{issue.kind}[/] {issue.message}")
    console.print(
        f"[bold red]Verification failed[/]: {len(report.issues)} dangling reference(s) "
        f"across {report.checked_nodes} node(s)."
    )


def _load_graph(config: Config) -> GraphStore:
    try:
        return load_graph(config)
    except ContentLoadError as error:
        console.print(f"[bold red]Load failed[/]: {error}")
        raise typer.Exit(code=1) from error


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(path: str | Path) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
