from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from sheetfill.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from sheetfill.form.filler import DEFAULT_FIELD_TARGETS, FormFiller, InMemoryFormTargets
from sheetfill.logging.error_log import ErrorLogBuffer
from sheetfill.logging.init import get_logger, log_summary, set_debug, setup_logging
from sheetfill.mapping.fields import FieldMapper
from sheetfill.models.config_models import LookupConfig
from sheetfill.services.loader import MissingIdentifierError, RecordLoader
from sheetfill.services.summary import render_summary_line
from sheetfill.stores import RecordNotFoundError, RecordStoreError, build_store
from sheetfill.table.columns import index_to_column

"""CLI entrypoint.

Flow:
- Load .env (overrides the process environment) and the YAML config
- Build the configured RecordStore
- Look up --id, normalize, fill an in-memory form with the configured targets
- Print the result and a SUMMARY line, flush the error log
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_LOOKUP_FAILED = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; its values win over the existing environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _field_target(text: str) -> tuple[str, str]:
    key, sep, target = text.partition("=")
    if not sep or not key.strip() or not target.strip():
        raise argparse.ArgumentTypeError(f"expected FIELD=TARGET, got {text!r}")
    return key.strip(), target.strip()


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheetfill", description="Look up a record by ID and fill a form")
    p.add_argument("--id", dest="identifier", help="Identifier (national ID number) to look up")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to lookup.yml")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    p.add_argument(
        "--field-target",
        action="append",
        type=_field_target,
        default=[],
        metavar="FIELD=TARGET",
        help="Override the form target of a field for this run (repeatable)",
    )
    p.add_argument("--json", action="store_true", help="Print the normalized record as JSON")
    return p.parse_args(argv)


def _inspect_data(cfg: LookupConfig) -> int:
    logger = get_logger()
    store = build_store(cfg.store)
    read_table = getattr(store, "read_table", None)
    if read_table is None:
        logger.error(f"inspect: store '{store.name}' serves single records only")
        return EXIT_FATAL
    try:
        table = read_table()
    except RecordStoreError as e:
        logger.error(f"inspect: {e}")
        return EXIT_FATAL
    if not table:
        print("inspect: sheet is empty")
        return EXIT_SUCCESS
    headers = [f"{index_to_column(i)}={str(h).strip()}" for i, h in enumerate(table[0])]
    print(f"STORE: {store.name} rows={len(table) - 1}")
    print(f"  headers={headers}")
    for row in table[1 : 1 + INSPECT_SAMPLE_ROWS]:
        print(f"  sample_row={[str(c) for c in row]}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not fall back to sys.argv (pytest's own flags)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    mapper = FieldMapper().with_overrides(cfg.header_map)
    store = build_store(cfg.store)
    error_log = ErrorLogBuffer()
    loader = RecordLoader(store, mapper=mapper, error_log=error_log)

    field_targets = {**DEFAULT_FIELD_TARGETS, **cfg.form.field_targets}
    overrides = dict(args.field_target)
    form = InMemoryFormTargets([*field_targets.values(), *overrides.values()])
    filler = FormFiller(form, default_mapping=field_targets)

    logger.info(f"store={store.name}")
    start = time.perf_counter()
    try:
        result = loader.load_and_fill(args.identifier, filler, overrides=overrides)
    except (MissingIdentifierError, RecordNotFoundError):
        _flush_error_log(error_log)
        return EXIT_LOOKUP_FAILED
    except RecordStoreError:
        _flush_error_log(error_log)
        return EXIT_FATAL
    elapsed = time.perf_counter() - start

    if args.json:
        print(json.dumps(result.record, ensure_ascii=False, indent=2))
    else:
        for target_id, value in form.filled().items():
            logger.info(f"form: {target_id}={value}")

    log_summary(render_summary_line(result, elapsed).removeprefix("SUMMARY "))
    _flush_error_log(error_log)
    return EXIT_SUCCESS


def _flush_error_log(error_log: ErrorLogBuffer) -> None:
    path = error_log.flush()
    if path is not None:
        get_logger().info(f"error log: {path}")
