import re

from models import SelectorCandidate

# Sinhala Unicode block
SINHALA_CHAR = re.compile(r"[\u0D80-\u0DFF]")
SINHALA_RUN = re.compile(r"[\u0D80-\u0DFF]+")

NO_OUTPUT = "No output found"


def _cands(*pairs) -> tuple[SelectorCandidate, ...]:
    return tuple(SelectorCandidate(value=v, label=l) for v, l in pairs)


INPUT_CANDIDATES = _cands(
    ("textarea", "textarea"),
    ("input[type='text']", "text input"),
    ("input[placeholder*='singlish' i]", "Singlish placeholder"),
    ("input[placeholder*='type' i]", "'type' placeholder"),
    ("input[placeholder*='enter' i]", "'enter' placeholder"),
    ("[contenteditable='true']", "contenteditable"),
    (".input-field", ".input-field"),
    ("#input", "#input"),
    ("input", "any input"),
)

OUTPUT_CANDIDATES = _cands(
    ("textarea[readonly]", "readonly textarea"),
    ("div.output", "div.output"),
    (".output-area", ".output-area"),
    ("#output", "#output"),
    (".sinhala-output", ".sinhala-output"),
    ("[aria-label*='output' i]", "output aria-label"),
    ("pre", "pre"),
    ("div[role='textbox']", "textbox div"),
    (".translation-result", ".translation-result"),
    (".result", ".result"),
    ("[class*='output' i]", "output class"),
    ("[class*='result' i]", "result class"),
    ("[class*='translation' i]", "translation class"),
)

CLEAR_BUTTON_TEXTS = ("Clear", "Reset", "X", "×", "✕", "🗑️", "Clear All", "Clear Text")

CLEAR_ARIA_CANDIDATES = _cands(
    ("button[aria-label*='clear' i]", "clear aria-label"),
    ("button[aria-label*='reset' i]", "reset aria-label"),
    ("button[title*='clear' i]", "clear title"),
    ("button[title*='reset' i]", "reset title"),
)

CLEAR_CLASS_CANDIDATES = _cands(
    ("button[class*='clear' i]", "clear class"),
    ("button[class*='reset' i]", "reset class"),
)

CLEAR_INDICATORS = ("clear", "reset", "x", "delete", "remove", "erase")

CLEAR_ANY_ELEMENT = (
    "[class*='clear' i], [class*='reset' i], [aria-label*='clear' i], "
    "[aria-label*='reset' i], [title*='clear' i], [title*='reset' i]"
)

LOADING_INDICATOR = ".loading, [aria-busy='true']"


def clear_text_candidates() -> tuple[SelectorCandidate, ...]:
    return tuple(
        SelectorCandidate(value=f'button:text-is("{t}")', label=f"button '{t}'")
        for t in CLEAR_BUTTON_TEXTS
    )
