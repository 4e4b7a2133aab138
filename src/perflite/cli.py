"""Command-line interface for perflite.

Subcommands:
    perflite run    Benchmark one or more ``module:callable`` targets
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any, Callable

import click

from perflite import __version__
from perflite.config import (
    DEFAULT_LABEL,
    BenchConfig,
    config_from_profile,
    load_profile,
    profile_targets,
)
from perflite.logging import get_logger, setup_logging
from perflite.results import BenchmarkResult
from perflite.runner import CalibratedRunner

log = get_logger("cli")

_UNIT_CHOICES = ["ns", "us", "ms", "s"]


def resolve_target(reference: str) -> Callable[..., Any]:
    """Import the callable named by ``module:qualname``.

    Raises:
        ValueError: If the reference is malformed or does not name a callable.
    """
    module_name, sep, qualname = reference.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Invalid target '{reference}'. Expected format: 'module:callable'.")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ValueError(f"'{module_name}' has no attribute '{qualname}'") from exc

    if not callable(obj):
        raise ValueError(f"Target '{reference}' is not callable.")
    return obj


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """perflite — calibrated micro-benchmarks for Python callables."""


@main.command("run")
@click.argument("targets", nargs=-1)
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, path_type=Path),
    help="YAML profile with benchmark settings and targets.",
)
@click.option("--warmup", type=int, default=None, help="Warm-up calls (default: 10).")
@click.option(
    "--iterations",
    type=int,
    default=None,
    help="Nominal iterations, used when calibration fails (default: 1000).",
)
@click.option(
    "--target-duration",
    "target_duration_ms",
    type=float,
    default=None,
    help="Target measurement time in milliseconds (default: 100).",
)
@click.option(
    "--unit",
    type=click.Choice(_UNIT_CHOICES, case_sensitive=False),
    default=None,
    help="Reporting unit (default: ns).",
)
@click.option(
    "--name",
    "label",
    type=str,
    default=None,
    help="Benchmark label (prefixes each target when several are given).",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON.")
@click.option("--samples", is_flag=True, default=False, help="Include raw samples in JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option("--log-file", type=click.Path(path_type=Path), default=None)
def run(  # noqa: PLR0913
    targets: tuple[str, ...],
    profile_path: Path | None,
    warmup: int | None,
    iterations: int | None,
    target_duration_ms: float | None,
    unit: str | None,
    label: str | None,
    as_json: bool,
    samples: bool,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Benchmark each TARGET, given as 'module:callable'.

    \b
    Examples:
        perflite run json:dumps --unit us
        perflite run mypkg.hot:loop --target-duration 500 --json
        perflite run --profile bench.yaml
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    cli_overrides: dict[str, object] = {
        "warmup": warmup,
        "iterations": iterations,
        "target_duration_ms": target_duration_ms,
        "unit": unit,
        "label": label,
    }

    try:
        profile_data = load_profile(profile_path) if profile_path else {}
        config = config_from_profile(profile_data, cli_overrides=cli_overrides)
        references = list(targets) or profile_targets(profile_data)
        if not references:
            raise ValueError("No targets given. Pass 'module:callable' or use --profile.")
        funcs = [(ref, resolve_target(ref)) for ref in references]
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    results: list[BenchmarkResult] = []
    for ref, func in funcs:
        run_config = _config_for_target(config, ref, count=len(funcs))
        log.info("Running %s", run_config.label)
        try:
            result = CalibratedRunner(run_config).run(func)
        except KeyboardInterrupt:
            click.echo("\nBenchmark interrupted.", err=True)
            raise SystemExit(130)  # noqa: B904
        except Exception as exc:
            click.echo(f"Error: benchmark '{run_config.label}' failed: {exc!r}", err=True)
            raise SystemExit(1) from exc
        results.append(result)

    _emit(results, as_json=as_json, include_samples=samples)


def _config_for_target(config: BenchConfig, reference: str, *, count: int) -> BenchConfig:
    """Label a run by its target reference, keeping any configured label.

    A single target keeps a configured label as-is.  With several
    targets the configured label becomes a prefix: ``"json [json:dumps]"``.
    """
    if config.label == DEFAULT_LABEL:
        return config.with_label(reference)
    if count == 1:
        return config
    return config.with_label(f"{config.label} [{reference}]")


def _emit(results: list[BenchmarkResult], *, as_json: bool, include_samples: bool) -> None:
    from perflite.display import format_result, format_results_table

    if as_json:
        payload = [r.to_dict(include_samples=include_samples) for r in results]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for r in results:
        click.echo(format_result(r))
    if len(results) > 1:
        click.echo(format_results_table(results))

