"""Command-line entrypoint: run a seed pattern and print a JSON summary."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sparse_life.config.constants import DEFAULT_PATTERN, SHORT_PERIOD_HISTORY
from sparse_life.config.types import RunConfig
from sparse_life.domain.cell import Cell
from sparse_life.domain.patterns import PATTERNS, get_pattern, parse_pattern
from sparse_life.metrics.spatial import bounding_box, centroid, cluster_count
from sparse_life.simulation.engine import run_simulation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Conway's Life on a sparse unbounded grid")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file of defaults; CLI arguments override file values",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--pattern", type=str, default=None, choices=sorted(PATTERNS))
    source.add_argument(
        "--pattern-file",
        type=Path,
        default=None,
        help="text file of rows where '#' marks a live cell",
    )
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--halt-window", type=int, default=None)
    parser.add_argument("--max-period", type=int, default=None)
    parser.add_argument(
        "--short-period-history-size",
        type=int,
        default=None,
        help="snapshots kept by the period detector (default: max(8, 2 * max-period))",
    )
    parser.add_argument("--stop-on-period", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--log-level", type=str, default=None, choices=LOG_LEVELS)
    return parser


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def _build_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Resolve run settings; the period history grows to fit ``max_period`` unless given."""
    max_period = _get_int(
        args.max_period, "max_period", file_cfg, RunConfig.short_period_max_period
    )
    return RunConfig(
        steps=_get_int(args.steps, "steps", file_cfg, RunConfig.steps),
        halt_window=_get_int(args.halt_window, "halt_window", file_cfg, RunConfig.halt_window),
        stop_on_period=_get_bool(
            args.stop_on_period, "stop_on_period", file_cfg, RunConfig.stop_on_period
        ),
        short_period_max_period=max_period,
        short_period_history_size=_get_int(
            args.short_period_history_size,
            "short_period_history_size",
            file_cfg,
            max(SHORT_PERIOD_HISTORY, 2 * max_period),
        ),
        strict=_get_bool(args.strict, "strict", file_cfg, RunConfig.strict),
    )


def _summarize(cells: frozenset[Cell]) -> dict[str, object]:
    center = centroid(cells)
    return {
        "population": len(cells),
        "clusters": cluster_count(cells),
        "bounding_box": bounding_box(cells),
        "centroid": None if center is None else [float(v) for v in center],
        "cells": [[cell.x, cell.y] for cell in sorted(cells)],
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single run.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _parse_log_level(_get_str(args.log_level, "log_level", file_cfg, "WARNING"))
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.pattern_file is not None:
        try:
            rows = Path(args.pattern_file).read_text().splitlines()
        except FileNotFoundError:
            parser.error(f"Pattern file not found: {args.pattern_file}")
        try:
            seed = parse_pattern(rows)
        except ValueError as exc:
            parser.error(f"Invalid pattern file {args.pattern_file}: {exc}")
        pattern_name = str(args.pattern_file)
    else:
        try:
            pattern_name = _get_str(args.pattern, "pattern", file_cfg, DEFAULT_PATTERN)
            seed = get_pattern(pattern_name)
        except ValueError as exc:
            parser.error(str(exc))
        except KeyError as exc:
            parser.error(str(exc.args[0]))

    try:
        config = _build_run_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    result = run_simulation(seed, config)
    summary = {
        "pattern": pattern_name,
        "generations": result.generations,
        "terminated_at": result.terminated_at,
        "termination_reason": result.termination_reason,
        "initial": _summarize(result.history[0]),
        "final": _summarize(result.final),
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
