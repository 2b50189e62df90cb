"""Command-line entrypoint: list, run, record and verify pattern scenarios."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

import jsonschema

from .harness import RunnerConfig, RunResult, ScenarioRunner
from .harness.transcripts import compare_results, load_transcripts, write_transcripts
from .patterns import default_runner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pattern-catalog", description=__doc__)
    p.add_argument("--list", action="store_true", help="List registered scenarios and exit")
    p.add_argument("--scenario", action="append", default=[],
                   help="Scenario(s) to run by name (repeatable); default runs all")
    p.add_argument("--group", choices=["creational", "structural", "behavioral"],
                   help="Run every scenario of one pattern group")
    p.add_argument("--jobs", type=int, default=1, help="Worker threads used to run scenarios")
    p.add_argument("--golden", type=Path, help="Golden transcript JSON to verify output against")
    p.add_argument("--record", type=Path, help="Write successful output as a golden transcript JSON")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    runner: ScenarioRunner | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.jobs < 1:
        parser.error("--jobs must be at least 1")
    if runner is None:
        runner = default_runner(RunnerConfig(max_workers=args.jobs))

    if args.list:
        for name in runner.list():
            scenario = runner.registry.get(name)
            out.write(f"{name}\t{scenario.group or '-'}\t{scenario.description or ''}\n")
        return 0

    if args.group and args.scenario:
        parser.error("--group and --scenario are mutually exclusive")

    golden = None
    if args.golden:
        try:
            golden = load_transcripts(args.golden)
        except (OSError, json.JSONDecodeError) as exc:
            parser.error(f"cannot read golden transcript {args.golden}: {exc}")
        except jsonschema.ValidationError as exc:
            parser.error(f"invalid golden transcript {args.golden}: {exc.message}")

    if args.group:
        results = runner.run_group(args.group)
    else:
        results = runner.run(args.scenario or None)

    _print_results(results, out)
    status = 0 if all(result.ok for result in results) else 1

    if args.record:
        write_transcripts(args.record, results)
        logger.info("Recorded %d transcript(s) to %s", sum(r.ok for r in results), args.record)

    if golden is not None:
        mismatches = compare_results(results, golden)
        for mismatch in mismatches:
            out.write(mismatch.render() + "\n")
        if mismatches:
            status = 1
    return status


def _print_results(results: Sequence[RunResult], out: TextIO) -> None:
    for result in results:
        out.write(f"== {result.name} ==\n")
        if result.ok:
            for line in result.lines:
                out.write(f"{line}\n")
        else:
            out.write(f"FAILED {result.failure}\n")


if __name__ == "__main__":
    raise SystemExit(main())
