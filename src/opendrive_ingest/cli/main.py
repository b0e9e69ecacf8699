"""Command line interface for OpenDRIVE ingestion."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from ..domain.models import IngestOptions, OutputFormat
from ..emitters.map_builder import RecordingMapBuilder
from ..pipeline import ingest_file
from ..topology.graph import TopologyMapBuilder
from ..utils.errors import IngestError
from ..utils.logging import configure_logger, get_logger

LOG = get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse an OpenDRIVE road network and emit map-builder calls")
    parser.add_argument("xodr", type=Path, help="Path to the OpenDRIVE (.xodr) file")
    parser.add_argument(
        "--format",
        "-f",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.CALLS.value,
        help="calls: one JSON object per map-builder call; summary: road topology summary (default: calls)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail the whole run on the first malformed road instead of skipping it",
    )
    parser.add_argument("--log-file", "-lf", dest="log_path", type=Path, help="Also write the log to this file")
    parser.add_argument("--no-console-log", "-nl", action="store_true", help="Disable console logging")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _build_options(args: argparse.Namespace) -> IngestOptions:
    return IngestOptions(
        strict=args.strict,
        console_log=not args.no_console_log,
        log_path=args.log_path,
        output_format=OutputFormat(args.output_format),
    )


def run(options: IngestOptions, xodr_path: Path, out: TextIO) -> int:
    configure_logger(options.log_path, console=options.console_log)
    try:
        if options.output_format is OutputFormat.SUMMARY:
            topology = TopologyMapBuilder()
            result = ingest_file(xodr_path, topology, options)
            summary = topology.summary()
            summary["rejected_roads"] = [exc.road_id for exc in result.rejected]
            out.write(json.dumps(summary, indent=2) + "\n")
        else:
            recorder = RecordingMapBuilder()
            ingest_file(xodr_path, recorder, options)
            for call in recorder.calls:
                out.write(json.dumps(call.to_json()) + "\n")
    except IngestError as exc:
        LOG.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    return run(_build_options(args), args.xodr, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
