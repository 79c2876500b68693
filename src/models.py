from dataclasses import dataclass, field
from typing import Any, Sequence

Expected = str | Sequence[str]


@dataclass(frozen=True)
class SelectorCandidate:
    value: str
    label: str = ""

    def __str__(self) -> str:
        return self.label or self.value


@dataclass
class LocatedElement:
    locator: Any
    candidate: SelectorCandidate


@dataclass(frozen=True)
class TranslationCase:
    id: str
    description: str
    input_text: str
    expected: Expected

    @property
    def name(self) -> str:
        return f"{self.id}: {self.description}"


@dataclass
class TestOutcome:
    __test__ = False  # not a pytest class

    test_id: str
    passed: bool
    input_text: str = ""
    expected: Expected | None = None
    actual: str = ""
    attempts: int = 0
    error: str = ""
    screenshot: str = ""
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        expected = self.expected
        if expected is not None and not isinstance(expected, str):
            expected = list(expected)
        return {
            "name": self.test_id,
            "status": "passed" if self.passed else "failed",
            "input": self.input_text,
            "expected": expected,
            "actual": self.actual,
            "attempts": self.attempts,
            "error": self.error,
            "screenshot": self.screenshot,
        }
