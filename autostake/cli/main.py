"""CLI entrypoint for autostake — typer app with a `run` command."""

import asyncio
import os
import sys
from pathlib import Path

import httpx
import structlog
import typer

from autostake.config.domain.network import NetworkConfig
from autostake.config.infrastructure.credentials import load_mnemonic
from autostake.config.infrastructure.json_loader import JsonNetworksLoader
from autostake.config.infrastructure.observer import StructlogConfigObserver
from autostake.core.errors import AutostakeError
from autostake.health.infrastructure.healthchecks import HealthchecksReporterFactory
from autostake.health.infrastructure.observer import StructlogHealthObserver
from autostake.orchestration.application.retry import RetryController
from autostake.orchestration.application.scheduler import NetworkScheduler
from autostake.orchestration.domain.history import AttemptStatus
from autostake.orchestration.domain.report import NetworkRunReport
from autostake.orchestration.infrastructure.observer import StructlogAutostakeObserver
from autostake.runner.domain.factory import NetworkRunnerFactory
from autostake.runner.infrastructure.registry import create_runner_factory

app = typer.Typer(add_completion=False)


# Keeps `run` as an explicit subcommand.
@app.callback()
def main() -> None:
    """Claim and restake rewards across the configured networks."""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


async def _run_scheduler(
    networks: list[NetworkConfig],
    runner_factory: NetworkRunnerFactory,
    network_names: list[str],
    dry_run: bool,
) -> list[NetworkRunReport]:
    observer = StructlogAutostakeObserver()
    async with httpx.AsyncClient() as client:
        scheduler = NetworkScheduler(
            networks=networks,
            retry_controller=RetryController(
                runner_factory=runner_factory,
                observer=observer,
            ),
            reporter_factory=HealthchecksReporterFactory(
                client=client,
                observer=StructlogHealthObserver(),
                dry_run=dry_run,
            ),
            observer=observer,
        )
        return await scheduler.run(network_names=network_names)


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"

_STATUS_COLORS: dict[AttemptStatus, str] = {
    AttemptStatus.SUCCEEDED: _GREEN,
    AttemptStatus.SKIPPED: _YELLOW,
    AttemptStatus.FAILED: _RED,
}


def _print_summary(reports: list[NetworkRunReport]) -> None:
    """Print one row per processed network: name, status, attempts, skip reason."""
    typer.echo("")
    typer.echo(f"{_CYAN}{'─' * 48}{_RESET}")
    typer.echo(f"{_CYAN}{_BOLD}  autostake  ·  Run Complete{_RESET}")
    typer.echo(f"{_CYAN}{'─' * 48}{_RESET}")

    if not reports:
        typer.echo(f"  {_DIM}No networks processed{_RESET}")
        return

    name_w = max(len(report.network) for report in reports)
    typer.echo(f"  {_DIM}{'Network':<{name_w}}  {'Status':<9}  Attempts{_RESET}")
    for report in reports:
        color = _STATUS_COLORS[report.status]
        reason = f"  {_DIM}{report.skip_reason}{_RESET}" if report.skip_reason else ""
        typer.echo(
            f"  {report.network:<{name_w}}  "
            f"{color}{report.status.value:<9}{_RESET}  {report.attempts:<8}{reason}"
        )
    typer.echo("")


@app.command()
def run(
    network_names: list[str] | None = typer.Argument(
        None, help="Networks to run; all enabled networks when omitted"
    ),
    networks_path: Path = typer.Option(
        Path("src/networks.json"),
        "--networks",
        help="Path to the networks JSON file",
    ),
    overrides_path: Path = typer.Option(
        Path("src/networks.local.json"),
        "--overrides",
        help="Path to the optional local overrides JSON file",
    ),
    runner_factory_path: str = typer.Option(
        ...,
        "--runner-factory",
        envvar="AUTOSTAKE_RUNNER_FACTORY",
        help="Import path 'module:attribute' of the network runner factory builder",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Build transactions and reports without sending"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run autostake for the selected networks."""
    _configure_structlog(log_format=log_format)

    try:
        mnemonic = load_mnemonic(environ=os.environ)
        loader = JsonNetworksLoader(
            observer=StructlogConfigObserver(), environ=os.environ
        )
        networks = loader.load(path=networks_path, overrides_path=overrides_path)
        runner_factory = create_runner_factory(
            import_path=runner_factory_path,
            mnemonic=mnemonic,
            dry_run=dry_run,
        )

        reports = asyncio.run(
            _run_scheduler(
                networks=networks,
                runner_factory=runner_factory,
                network_names=network_names or [],
                dry_run=dry_run,
            )
        )
        _print_summary(reports=reports)

    except KeyboardInterrupt:
        typer.echo("Autostake interrupted.")
        sys.exit(1)
    except AutostakeError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
