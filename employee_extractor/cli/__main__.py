from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from employee_extractor.config.loader import DEFAULT_CONFIG_PATH, ConfigError, ExtractConfig, load_config
from employee_extractor.excel.header import locate_header
from employee_extractor.excel.reader import DecodeFailure, candidate_encodings, decode
from employee_extractor.excel.rows import extract_rows
from employee_extractor.logging.init import log_summary, set_debug, setup_logging
from employee_extractor.models.processing_result import ProcessingResult
from employee_extractor.services.orchestrator import ProcessingError, process_all, scan_roster_files
from employee_extractor.services.summary import render_summary_line

"""CLI entrypoint: `python -m employee_extractor.cli`.

Flow:
- Load .env (override), resolve config path (--config > EXTRACTOR_CONFIG > config/extract.yml)
- Load and validate config
- Extract every roster file in source_directory, print SUMMARY
- Optional JSON Lines export of all records (--output)

Exit codes: 0 all files succeeded (or none found), 2 at least one file
failed, 1 fatal startup/processing error.
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

CONFIG_ENV_VAR = "EXTRACTOR_CONFIG"
INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env with python-dotenv; values override the existing environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Employee roster (CSV/Excel) extractor")
    p.add_argument("--config", help=f"Config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--inspect-data", action="store_true", help="Print detected header & first records per file, then exit"
    )
    p.add_argument("--output", help="Write extracted records as JSON Lines to this path")
    return p.parse_args(argv)


def _resolve_config_path(args: argparse.Namespace) -> Path:
    return Path(args.config or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def _inspect_data(cfg: ExtractConfig) -> int:
    settings = cfg.settings
    try:
        files = scan_roster_files(Path(cfg.source_directory))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no roster files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            data = f.read_bytes()
        except OSError as e:
            print(f"inspect: {f.name}: read failed: {e}")
            return EXIT_FATAL
        for encoding in candidate_encodings(f.name, settings.csv_encoding, settings.default_encoding):
            label = encoding or "native"
            try:
                grid = decode(data, f.name, encoding=encoding)
            except DecodeFailure as e:
                print(f"  [{label}] decode_error: {e}")
                continue
            header_index, mapping = locate_header(
                grid, settings.synonyms, settings.header_scan_limit, settings.min_header_matches
            )
            records = extract_rows(grid, header_index, mapping, settings)
            header = grid[header_index] if header_index < len(grid) else []
            print(f"  [{label}] rows={len(grid)} header_row={header_index} mapping={mapping.as_dict()}")
            print(f"    header={header}")
            print(f"    records={len(records)} sample={[r.to_dict() for r in records[:INSPECT_SAMPLE_ROWS]]}")
            if records:
                break
    return EXIT_SUCCESS_ALL


def _write_records(path: Path, result: ProcessingResult) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for records in result.records.values():
            for record in records:
                f.write(record.to_json_line() + "\n")
                count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: 空リスト [] はそのまま使う (None のときだけ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    config_path = _resolve_config_path(args)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        return _inspect_data(cfg)

    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    if args.output:
        try:
            written = _write_records(Path(args.output), result)
        except OSError as e:
            logger.error(f"output: cannot write {args.output}: {e}")
            return EXIT_FATAL
        logger.info(f"wrote {written} records to {args.output}")

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
