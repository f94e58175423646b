"""Evaluate a JSON rule set against a JSON reference document.

Purpose:
  - Check gating rules from the shell or CI without writing a host application.
Inputs:
  - --rules rule-set JSON, --reference reference JSON, optional --previous snapshot.
Outputs:
  - PASS / FAIL / NO_RULES on stdout; exit code 0 / 1 / 2 (2 also for config errors).
Example:
  - PYTHONPATH=. python3 condgate/cli/run_conditions.py --rules gate.json --reference event.json --trace
"""

from __future__ import annotations

import argparse
import sys

from condgate.app_api.collaborators import field_reference_transform, previous_from_snapshot
from condgate.cli._debug_utils import _dbg, _dbg_lines
from condgate.config.rule_set_file import load_reference, load_rule_set
from condgate.core.domain.enums import SatisfyMode
from condgate.core.domain.errors import ConfigurationError
from condgate.core.engine.evaluator import evaluate_report

EXIT_PASS = 0
EXIT_FAIL = 1
EXIT_ERROR = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a rule set against a reference document")
    parser.add_argument("--rules", required=True, help="Rule set JSON ({\"rules\": [...]} or a bare array)")
    parser.add_argument("--reference", required=True, help="Reference JSON document under test")
    parser.add_argument(
        "--previous",
        help="Earlier snapshot of the reference; enables the crosses operator",
    )
    parser.add_argument(
        "--satisfy",
        choices=[mode.value for mode in SatisfyMode],
        help="Override the satisfy mode from the rule set file",
    )
    parser.add_argument(
        "--field-ref-prefix",
        dest="field_ref_prefix",
        help="Treat string values starting with this prefix as paths into the reference",
    )
    parser.add_argument("--trace", action="store_true", help="Print the evaluation trace")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    return parser.parse_args(argv)


def main(argv: list[str]) -> int:
    args = parse_args(argv)

    try:
        reference = load_reference(args.reference)
        previous_value_fn = None
        if args.previous:
            previous_value_fn = previous_from_snapshot(load_reference(args.previous))
            _dbg(args, f"previous snapshot loaded from {args.previous}")
        transform_value_fn = None
        if args.field_ref_prefix is not None:
            transform_value_fn = field_reference_transform(args.field_ref_prefix)
            _dbg(args, f"field references enabled prefix={args.field_ref_prefix!r}")

        config = load_rule_set(
            args.rules,
            previous_value_fn=previous_value_fn,
            transform_value_fn=transform_value_fn,
            satisfy=args.satisfy,
        )
        report = evaluate_report(config, reference)
    except ConfigurationError as exc:
        where = f" (rule {exc.index})" if exc.index is not None else ""
        print(f"ERROR: {exc}{where}")
        return EXIT_ERROR
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return EXIT_ERROR

    if report is None:
        print("NO_RULES")
        return EXIT_ERROR

    _dbg_lines(args, "trace", report.trace.splitlines())
    if args.trace:
        print(report.trace)
    print("PASS" if report.outcome else "FAIL")
    return EXIT_PASS if report.outcome else EXIT_FAIL


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
