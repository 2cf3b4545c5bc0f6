from __future__ import annotations

"""Command line interface for bcanalysis using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import ValidationError

from .config import Settings, load_settings
from .core.session import BeforeClosureAnalysis
from .errors import BCAnalysisError
from .types import AnalysisMode
from .utils.logging import get_logger

app = typer.Typer(help="Before-closure analysis of shut-in pressure decline")
logger = logging.getLogger(__name__)


def _split_floats(value: str, name: str) -> list[float]:
    try:
        return [float(item) for item in value.split(",") if item.strip()]
    except ValueError:
        raise typer.BadParameter(f"expected comma-separated numbers: {value}", param_hint=name) from None


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _parse_mode(value: Optional[str]) -> Optional[AnalysisMode]:
    if value is None:
        return None
    try:
        return AnalysisMode.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--mode") from exc


def _build_analysis(
    settings: Settings,
    time: str,
    pressure: str,
    mode: Optional[str],
    window: Optional[int],
) -> BeforeClosureAnalysis:
    try:
        return BeforeClosureAnalysis(
            _split_floats(time, "--time"),
            _split_floats(pressure, "--pressure"),
            mode=_parse_mode(mode),
            window=window,
            settings=settings,
        )
    except BCAnalysisError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. analysis.window=9",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, RuntimeError, TypeError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    get_logger("bcanalysis", level=settings.logging.level)
    ctx.obj = settings


@app.command()
def series(
    ctx: typer.Context,
    time: str = typer.Option(..., "--time", "-t", help="Comma-separated dimensionless shut-in times."),
    pressure: str = typer.Option(..., "--pressure", "-p", help="Comma-separated shut-in pressures."),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="sqrt or g-function."),
    window: Optional[int] = typer.Option(None, "--window", "-w", min=0),
    as_json: bool = typer.Option(False, "--json", help="Emit the series as JSON."),
) -> None:
    """Print transformed time, derivative and log-derivative for a record.

    One line per sample is written with the columns ``x``, ``p``, ``dp/dx``
    and ``x*dp/dx``.  With ``--json`` a single object holding the three
    series is printed instead.
    """

    cfg: Settings = ctx.obj
    analysis = _build_analysis(cfg, time, pressure, mode, window)
    try:
        result = analysis.series
    except BCAnalysisError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logger.debug("%s analysis of %d samples", result.mode.value, len(result))

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "mode": result.mode.value,
                    "window": result.window,
                    "x": result.x.tolist(),
                    "dx": result.dx.tolist(),
                    "xdx": result.xdx.tolist(),
                }
            )
        )
        return
    for x, p, dx, xdx in zip(result.x, analysis.pressure, result.dx, result.xdx):
        typer.echo(f"{x:.6g}\t{p:.6g}\t{dx:.6g}\t{xdx:.6g}")


@app.command()
def cursor(
    ctx: typer.Context,
    at: float = typer.Option(..., "--at", help="Transformed-time coordinate to read."),
    time: str = typer.Option(..., "--time", "-t", help="Comma-separated dimensionless shut-in times."),
    pressure: str = typer.Option(..., "--pressure", "-p", help="Comma-separated shut-in pressures."),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="sqrt or g-function."),
    window: Optional[int] = typer.Option(None, "--window", "-w", min=0),
) -> None:
    """Read every series at the sample nearest to ``--at``."""

    cfg: Settings = ctx.obj
    analysis = _build_analysis(cfg, time, pressure, mode, window)
    try:
        readout = analysis.cursor(at)
    except BCAnalysisError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(
        f"index={readout.index} x={readout.x:.6g} p={readout.pressure:.6g} "
        f"dx={readout.dx:.6g} xdx={readout.xdx:.6g}"
    )


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
