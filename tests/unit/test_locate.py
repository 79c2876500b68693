"""Tests for the element locator."""

import pytest
from fakes import FakeElement, FakePage

from candidates import INPUT_CANDIDATES
from exceptions import ElementNotFoundError
from harness import locate, locate_input
from models import SelectorCandidate

CANDS = [
    SelectorCandidate("textarea", "textarea"),
    SelectorCandidate("input[type='text']", "text input"),
    SelectorCandidate("input", "any input"),
]


@pytest.mark.asyncio
async def test_returns_first_visible_candidate(tmp_path):
    textarea = FakeElement(value="", name="textarea")
    text_input = FakeElement(value="", name="text")
    page = FakePage(selectors={"textarea": [textarea], "input[type='text']": [text_input]})

    found = await locate(page, CANDS, artifacts_dir=tmp_path)

    assert found.locator.elements == [textarea]
    assert found.candidate.value == "textarea"


@pytest.mark.asyncio
async def test_skips_invisible_higher_priority_match(tmp_path):
    hidden = FakeElement(value="", visible=False)
    text_input = FakeElement(value="")
    page = FakePage(selectors={"textarea": [hidden], "input[type='text']": [text_input]})

    found = await locate(page, CANDS, artifacts_dir=tmp_path)

    assert found.candidate.value == "input[type='text']"
    assert found.locator.elements == [text_input]


@pytest.mark.asyncio
async def test_only_first_match_of_a_candidate_is_checked(tmp_path):
    """A hidden first match is not rescued by a visible second match."""
    hidden = FakeElement(value="", visible=False)
    visible = FakeElement(value="")
    fallback = FakeElement(value="")
    page = FakePage(selectors={"textarea": [hidden, visible], "input": [fallback]})

    found = await locate(page, CANDS, artifacts_dir=tmp_path)

    assert found.candidate.value == "input"


@pytest.mark.asyncio
async def test_focus_click_and_no_click_when_disabled(tmp_path):
    field = FakeElement(value="")
    page = FakePage(selectors={"textarea": [field]})

    await locate(page, CANDS, artifacts_dir=tmp_path)
    assert field.clicks == 1

    await locate(page, CANDS, focus=False, artifacts_dir=tmp_path)
    assert field.clicks == 1


@pytest.mark.asyncio
async def test_probe_errors_fall_through_to_next_candidate(tmp_path):
    field = FakeElement(value="")
    page = FakePage(selectors={"input": [field]}, fail_selectors={"textarea"})

    found = await locate(page, CANDS, artifacts_dir=tmp_path)

    assert found.candidate.value == "input"


@pytest.mark.asyncio
async def test_no_visible_input_raises_with_candidates(tmp_path):
    page = FakePage(
        selectors={"textarea": [FakeElement(visible=False)]},
        body_text="Welcome to the translator",
    )

    with pytest.raises(ElementNotFoundError) as exc_info:
        await locate_input(page, artifacts_dir=tmp_path)

    err = exc_info.value
    assert err.what == "input"
    assert err.candidates == list(INPUT_CANDIDATES)
    assert "textarea" in str(err)
    assert (tmp_path / "debug_input_not_found.png").exists()


@pytest.mark.asyncio
async def test_diagnostics_failure_does_not_mask_not_found(tmp_path):
    page = FakePage()

    async def broken_screenshot(path=None, full_page=False):
        raise RuntimeError("browser closed")

    page.screenshot = broken_screenshot

    with pytest.raises(ElementNotFoundError):
        await locate(page, CANDS, artifacts_dir=tmp_path)
