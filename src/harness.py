import re
import time
from pathlib import Path

from candidates import (
    CLEAR_ANY_ELEMENT,
    CLEAR_ARIA_CANDIDATES,
    CLEAR_CLASS_CANDIDATES,
    CLEAR_INDICATORS,
    INPUT_CANDIDATES,
    LOADING_INDICATOR,
    NO_OUTPUT,
    OUTPUT_CANDIDATES,
    SINHALA_CHAR,
    SINHALA_RUN,
    clear_text_candidates,
)
from config import DEFAULT_ARTIFACTS_DIR, Timeouts
from exceptions import ElementNotFoundError, OutputMismatchError, RetriesExhaustedError
from models import LocatedElement, SelectorCandidate, TestOutcome


def sanitize_for_filename(text: str) -> str:
    """Sanitize text for use in filenames."""
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[-\s]+', '_', text)
    return text.strip('_').lower()[:100]


async def capture_debug_artifacts(page, name: str, artifacts_dir: Path | None = None, include_text: bool = False, verbose: bool = False) -> str:
    """Save a full-page screenshot (and optionally print leading body text).

    Best-effort: returns the screenshot path, or "" if nothing could be saved.
    """
    out_dir = Path(artifacts_dir or DEFAULT_ARTIFACTS_DIR)
    shot = out_dir / f"{sanitize_for_filename(name)}.png"
    saved = ""
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(shot), full_page=True)
        saved = str(shot)
        if verbose:
            print(f"📸 Debug screenshot saved: {shot.name}")
    except Exception as e:
        if verbose:
            print(f"⚠️ Could not save debug screenshot: {e}")
    if include_text:
        try:
            body = await page.text_content("body") or ""
            print(f"→ Page body text (first 500 chars): {body[:500]}")
        except Exception:
            pass
    return saved


async def _first_visible(page, candidate: SelectorCandidate):
    """Return the first match of candidate if it is visible, else None."""
    try:
        loc = page.locator(candidate.value).first
        if await loc.count() == 0:
            return None
        if await loc.is_visible():
            return loc
    except Exception:
        pass
    return None


async def locate(page, candidates, *, what: str = "element", focus: bool = True, wait: bool = True, artifacts_dir: Path | None = None, verbose: bool = False) -> LocatedElement:
    """Return the first visible element in candidate priority order.

    Raises ElementNotFoundError listing every candidate tried when none match.
    """
    candidates = list(candidates)
    if wait:
        try:
            await page.wait_for_load_state("networkidle", timeout=Timeouts.NETWORK_IDLE)
        except Exception:
            pass
        await page.wait_for_timeout(Timeouts.PRE_PROBE)

    for cand in candidates:
        loc = await _first_visible(page, cand)
        if loc is None:
            if verbose:
                print(f"→ {what}: {cand} not found or not visible")
            continue
        if verbose:
            print(f"✓ Found {what} using selector: {cand.value}")
        if focus:
            try:
                await loc.click(force=True)
            except Exception as e:
                if verbose:
                    print(f"⚠️ Focus click on {what} failed: {e}")
            await page.wait_for_timeout(Timeouts.FOCUS)
        return LocatedElement(locator=loc, candidate=cand)

    await capture_debug_artifacts(
        page, f"debug-{what}-not-found", artifacts_dir, include_text=True, verbose=verbose
    )
    raise ElementNotFoundError(what, candidates)


async def locate_input(page, artifacts_dir: Path | None = None, verbose: bool = False) -> LocatedElement:
    return await locate(page, INPUT_CANDIDATES, what="input", artifacts_dir=artifacts_dir, verbose=verbose)


async def _read_text(loc) -> str:
    # text, then value attribute, then input value
    for getter in (
        lambda: loc.text_content(),
        lambda: loc.get_attribute("value"),
        lambda: loc.input_value(),
    ):
        try:
            text = await getter()
        except Exception:
            continue
        if text and text.strip():
            return text.strip()
    return ""


async def read_output(page, *, wait: bool = True, artifacts_dir: Path | None = None, verbose: bool = False) -> str:
    """Read the rendered translation, or NO_OUTPUT when nothing is found."""
    if wait:
        await page.wait_for_timeout(Timeouts.OUTPUT_WAIT)

    for cand in OUTPUT_CANDIDATES:
        loc = await _first_visible(page, cand)
        if loc is None:
            continue
        text = await _read_text(loc)
        if text:
            if verbose:
                print(f"✓ Found output using selector: {cand.value}")
            return text

    try:
        loc = page.locator("body *").filter(has_text=SINHALA_CHAR).first
        if await loc.count() > 0:
            text = (await loc.text_content() or "").strip()
            if text:
                if verbose:
                    print("✓ Found Sinhala text using Unicode filter")
                return text
    except Exception as e:
        if verbose:
            print(f"→ Unicode filter scan failed: {e}")

    try:
        body = await page.text_content("body") or ""
    except Exception:
        body = ""
    matches = SINHALA_RUN.findall(body)
    if matches:
        if verbose:
            print("✓ Found Sinhala text in body")
        return " ".join(matches)

    await capture_debug_artifacts(
        page, f"debug-output-not-found-{int(time.time() * 1000)}", artifacts_dir, verbose=verbose
    )
    return NO_OUTPUT


async def _looks_like_clear(loc) -> bool:
    text = ((await loc.text_content()) or "").strip()
    attrs = [text.lower()]
    for name in ("aria-label", "title", "class"):
        attrs.append(((await loc.get_attribute(name)) or "").lower())
    if text in ("X", "×"):
        return True
    return any(ind in a for ind in CLEAR_INDICATORS for a in attrs)


async def find_clear_control(page, verbose: bool = False) -> LocatedElement | None:
    """Find a clear/reset control; None when the page has none."""
    if verbose:
        print("→ Looking for clear button...")

    for stage in (clear_text_candidates(), CLEAR_ARIA_CANDIDATES, CLEAR_CLASS_CANDIDATES):
        for cand in stage:
            loc = await _first_visible(page, cand)
            if loc is not None:
                if verbose:
                    print(f"✓ Found clear control: {cand}")
                return LocatedElement(locator=loc, candidate=cand)

    try:
        buttons = page.locator("button")
        count = await buttons.count()
        if verbose:
            print(f"→ Total buttons found: {count}")
        for i in range(count):
            btn = buttons.nth(i)
            try:
                if await btn.is_visible() and await _looks_like_clear(btn):
                    if verbose:
                        print(f"✓ Found potential clear button {i}")
                    return LocatedElement(locator=btn, candidate=SelectorCandidate(value="button", label=f"button #{i}"))
            except Exception:
                continue
    except Exception:
        pass

    try:
        elements = page.locator(CLEAR_ANY_ELEMENT)
        count = await elements.count()
        for i in range(count):
            el = elements.nth(i)
            try:
                if await el.is_visible():
                    if verbose:
                        print(f"✓ Found clear element {i}")
                    return LocatedElement(locator=el, candidate=SelectorCandidate(value=CLEAR_ANY_ELEMENT, label=f"clear-like element #{i}"))
            except Exception:
                continue
    except Exception:
        pass

    if verbose:
        print("⚠️ No clear button found")
    return None


def check_output(actual: str, expected) -> None:
    """Exact match for a string, containment for each item of a sequence."""
    if isinstance(expected, str):
        if actual != expected:
            raise OutputMismatchError(actual, expected)
        return
    for item in expected:
        if item not in actual:
            raise OutputMismatchError(actual, expected, missing=item)


async def open_translator(page, base_url: str, verbose: bool = False) -> None:
    if verbose:
        print(f"→ Opening {base_url}")
    await page.goto(base_url, timeout=Timeouts.NAVIGATION)
    await page.wait_for_load_state("domcontentloaded")
    await page.wait_for_timeout(Timeouts.PAGE_SETTLE)
    # No loading indicator is fine
    try:
        await page.wait_for_selector(LOADING_INDICATOR, state="hidden", timeout=Timeouts.LOADING_HIDDEN)
    except Exception:
        pass


async def reload_page(page) -> None:
    await page.reload()
    try:
        await page.wait_for_load_state("networkidle", timeout=Timeouts.NETWORK_IDLE)
    except Exception:
        pass
    await page.wait_for_timeout(Timeouts.PAGE_SETTLE)


async def run_translation_test(page, test_id: str, input_text: str, expected, max_retries: int = 3, *, settle_ms: int = Timeouts.SETTLE, artifacts_dir: Path | None = None, verbose: bool = False) -> TestOutcome:
    """Enter input_text, read the output and check it against expected.

    Each failed attempt reloads the page; after max_retries attempts the
    last error is raised wrapped in RetriesExhaustedError.
    """
    max_retries = max(1, max_retries)
    actual = ""
    last_error = None
    attempt = 0
    while attempt < max_retries:
        attempt += 1
        actual = ""
        try:
            field = await locate_input(page, artifacts_dir=artifacts_dir, verbose=verbose)
            await field.locator.clear()
            await page.wait_for_timeout(Timeouts.FOCUS)
            await field.locator.fill(input_text)
            await page.wait_for_timeout(settle_ms)

            actual = await read_output(page, artifacts_dir=artifacts_dir, verbose=verbose)
            if verbose:
                print(f"→ {test_id} - Input: {input_text!r}")
                print(f"→ {test_id} - Expected: {expected!r}")
                print(f"→ {test_id} - Actual: {actual!r}")
            check_output(actual, expected)
            return TestOutcome(
                test_id=test_id,
                passed=True,
                input_text=input_text,
                expected=expected,
                actual=actual,
                attempts=attempt,
            )
        except Exception as e:
            last_error = e
            left = max_retries - attempt
            print(f"✖ {test_id} failed, {left} retries left. Error: {e}")
            if left == 0:
                break
            await reload_page(page)

    outcome = TestOutcome(
        test_id=test_id,
        passed=False,
        input_text=input_text,
        expected=expected,
        actual=actual,
        attempts=attempt,
        error=str(last_error),
    )
    raise RetriesExhaustedError(test_id, attempt, last_error, outcome=outcome) from last_error


async def run_clear_check(page, first_text: str, second_text: str, *, settle_ms: int = Timeouts.SETTLE, artifacts_dir: Path | None = None, verbose: bool = False) -> dict:
    """Fill, clear (button or manual), and refill the input, asserting each value."""
    field = await locate_input(page, artifacts_dir=artifacts_dir, verbose=verbose)
    inp = field.locator

    await inp.click()
    await inp.clear()
    await page.wait_for_timeout(Timeouts.FOCUS)
    await inp.fill(first_text)
    await page.wait_for_timeout(settle_ms)

    value = await inp.input_value()
    if value != first_text:
        raise AssertionError(f"Input value {value!r} != {first_text!r}")

    initial_output = await read_output(page, artifacts_dir=artifacts_dir, verbose=verbose)
    if initial_output == NO_OUTPUT:
        print("⚠️ Initial output is empty; continuing")
        initial_output = ""

    button = await find_clear_control(page, verbose=verbose)
    if button is not None:
        if verbose:
            print(f"→ Clicking clear control: {button.candidate}")
        await button.locator.click()
        await page.wait_for_timeout(Timeouts.CLEAR_SETTLE)
        if await inp.input_value() != "":
            print(f"⚠️ Clear control {button.candidate} left the input filled, clearing manually")
            button = None
    if button is None:
        if verbose:
            print("→ Clearing input manually")
        await inp.click()
        await inp.clear()
        await page.wait_for_timeout(Timeouts.FOCUS)

    cleared = await inp.input_value()
    if cleared != "":
        raise AssertionError(f"Input not cleared, value is {cleared!r}")

    cleared_output = await read_output(page, artifacts_dir=artifacts_dir, verbose=verbose)
    if cleared_output == NO_OUTPUT:
        cleared_output = ""
    if initial_output and cleared_output and cleared_output == initial_output:
        raise AssertionError("Output did not change after clearing the input")

    await inp.fill(second_text)
    await page.wait_for_timeout(settle_ms)
    new_value = await inp.input_value()
    if new_value != second_text:
        raise AssertionError(f"Input value {new_value!r} != {second_text!r}")

    new_output = await read_output(page, artifacts_dir=artifacts_dir, verbose=verbose)
    if new_output == NO_OUTPUT and verbose:
        print("⚠️ New output is also empty")

    return {
        "clear_button_used": button is not None,
        "clear_control": str(button.candidate) if button is not None else "",
        "initial_output": initial_output,
        "cleared_output": cleared_output,
        "new_value": new_value,
        "new_output": new_output,
    }
