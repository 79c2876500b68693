#!/usr/bin/env python3

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

from cases import SUITES, UI_CASES, find_case
from config import HarnessConfig
from suite import run_test_suite


def select_cases(args: argparse.Namespace):
    if args.case:
        cases = []
        ui_cases = []
        for case_id in args.case:
            case = find_case(case_id)
            if case is not None:
                cases.append(case)
                continue
            ui = [u for u in UI_CASES if u[0] == case_id]
            if not ui:
                raise SystemExit(f"Unknown test case: {case_id}")
            ui_cases.extend(ui)
        return cases, ui_cases

    names = list(SUITES) + ["ui"] if args.suite == "all" else [args.suite]
    cases = [c for name in names if name in SUITES for c in SUITES[name]]
    ui_cases = list(UI_CASES) if "ui" in names else []
    return cases, ui_cases


def build_config(args: argparse.Namespace) -> HarnessConfig:
    config = HarnessConfig.from_env()
    if args.base_url:
        config.base_url = args.base_url
    if args.headful:
        config.headless = False
    if args.verbose:
        config.verbose = True
    if args.max_retries is not None:
        config.max_retries = max(1, args.max_retries)
    if args.settle_ms is not None:
        config.settle_ms = args.settle_ms
    return config


def main():
    parser = argparse.ArgumentParser(description="Singlish → Sinhala translator end-to-end tests")
    parser.add_argument("--base-url", help="Translator URL (default: $TRANSLATOR_URL or swifttranslator.com)")
    parser.add_argument("--suite", choices=["positive", "negative", "ui", "all"], default="all")
    parser.add_argument("--case", action="append", help="Run only this test id (repeatable)")
    parser.add_argument("--max-retries", type=int, help="Attempts per test, page reloaded between attempts")
    parser.add_argument("--settle-ms", type=int, help="Wait after typing before reading the output")
    parser.add_argument("--headful", action="store_true", help="Run browser headful for debugging")
    parser.add_argument("--verbose", action="store_true", help="Print selector probing and step logs")

    args = parser.parse_args()
    config = build_config(args)
    cases, ui_cases = select_cases(args)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(config.artifacts_dir) / f"run_{timestamp}"
    run_dir.mkdir(parents=True, exist_ok=True)

    print(f"🏃 Running {len(cases) + len(ui_cases)} test(s) against {config.base_url}...")
    results_json = asyncio.run(run_test_suite(config, cases, run_dir, ui_cases=ui_cases))

    total = len(results_json.get("tests", []))
    passed = sum(1 for r in results_json.get("tests", []) if r.get("status") == "passed")
    failed = total - passed
    print(f"✅ Done. Total: {total}, Passed: {passed}, Failed: {failed}")
    if failed:
        print(f"📸 Debug screenshots: {run_dir / 'screenshots'}")
        sys.exit(1)


if __name__ == "__main__":
    main()
