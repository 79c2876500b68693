import re
from pathlib import Path

from playwright.async_api import async_playwright

from config import HarnessConfig, Timeouts
from exceptions import RetriesExhaustedError
from harness import open_translator, run_clear_check, run_translation_test, sanitize_for_filename
from models import TestOutcome, TranslationCase


def get_screenshot_path(screenshots_dir: Path, test_name: str, action_type: str, context: str = "") -> Path:
    """Generate a descriptive screenshot path.

    Args:
        screenshots_dir: Directory for this run's screenshots
        test_name: Name of the test case
        action_type: Type of screenshot (failure, debug)
        context: Additional context, usually the error
    """
    test_slug = sanitize_for_filename(test_name)
    action_slug = sanitize_for_filename(action_type)
    context_slug = f"_{sanitize_for_filename(context)}" if context else ""
    return screenshots_dir / f"test_{test_slug}_{action_slug}{context_slug}.png"


async def _failure_screenshot(page, screenshots_dir: Path, name: str, error: str, verbose: bool) -> str:
    try:
        error_context = sanitize_for_filename(re.split(r"[(:]", error)[0].strip()[:50]) if error else "error"
        shot = get_screenshot_path(screenshots_dir, name, "failure", context=error_context)
        await page.screenshot(path=str(shot), full_page=True)
        if verbose:
            print(f"📸 Failure screenshot saved: {shot.name}")
        return str(shot)
    except Exception as e:
        if verbose:
            print(f"⚠️ Could not save failure screenshot: {e}")
        return ""


async def run_case(page, case: TranslationCase, config: HarnessConfig, screenshots_dir: Path) -> TestOutcome:
    """Open the translator on page and run one case, never raising."""
    try:
        await open_translator(page, config.base_url, verbose=config.verbose)
        return await run_translation_test(
            page,
            case.id,
            case.input_text,
            case.expected,
            max_retries=config.max_retries,
            settle_ms=config.settle_ms,
            artifacts_dir=screenshots_dir,
            verbose=config.verbose,
        )
    except RetriesExhaustedError as e:
        outcome = e.outcome
    except Exception as e:
        outcome = TestOutcome(
            test_id=case.id,
            passed=False,
            input_text=case.input_text,
            expected=case.expected,
            error=str(e),
        )
    outcome.screenshot = await _failure_screenshot(page, screenshots_dir, case.name, outcome.error, config.verbose)
    return outcome


async def run_ui_case(page, case_id: str, first_text: str, second_text: str, config: HarnessConfig, screenshots_dir: Path) -> TestOutcome:
    try:
        await open_translator(page, config.base_url, verbose=config.verbose)
        await page.wait_for_timeout(Timeouts.PAGE_SETTLE)
        details = await run_clear_check(
            page,
            first_text,
            second_text,
            settle_ms=config.settle_ms,
            artifacts_dir=screenshots_dir,
            verbose=config.verbose,
        )
        return TestOutcome(
            test_id=case_id,
            passed=True,
            input_text=first_text,
            expected=second_text,
            actual=details["new_value"],
            attempts=1,
            details=details,
        )
    except Exception as e:
        error = str(e)
        return TestOutcome(
            test_id=case_id,
            passed=False,
            input_text=first_text,
            expected=second_text,
            attempts=1,
            error=error,
            screenshot=await _failure_screenshot(page, screenshots_dir, case_id, error, config.verbose),
        )


async def run_test_suite(config: HarnessConfig, cases: list[TranslationCase], run_dir: Path, ui_cases: list[tuple] | None = None) -> dict:
    """Run every case in its own browser context and collect outcomes."""
    screenshots_dir = run_dir / "screenshots"
    screenshots_dir.mkdir(parents=True, exist_ok=True)

    results: list[TestOutcome] = []
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=config.headless)

        async def with_page(coro_fn):
            context = await browser.new_context(viewport={"width": 1366, "height": 900})
            try:
                page = await context.new_page()
                return await coro_fn(page)
            finally:
                await context.close()

        for case in cases:
            if config.verbose:
                print(f"\n===== Running Test: {case.name} =====")
            outcome = await with_page(lambda page: run_case(page, case, config, screenshots_dir))
            results.append(outcome)
            _print_outcome(outcome)

        for case_id, description, first_text, second_text in ui_cases or []:
            if config.verbose:
                print(f"\n===== Running Test: {case_id}: {description} =====")
            outcome = await with_page(
                lambda page: run_ui_case(page, case_id, first_text, second_text, config, screenshots_dir)
            )
            results.append(outcome)
            _print_outcome(outcome)

        await browser.close()
    return {"tests": [r.to_dict() for r in results]}


def _print_outcome(outcome: TestOutcome) -> None:
    if outcome.passed:
        print(f"✓ Passed: {outcome.test_id} (attempts={outcome.attempts})")
    else:
        error = outcome.error
        err_excerpt = error if len(error) < 300 else (error[:297] + "...")
        print(f"✖ Failed: {outcome.test_id} — {err_excerpt}")
