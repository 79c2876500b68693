"""Exceptions raised by the translator test harness."""


class HarnessError(Exception):
    """Base exception for harness failures."""

    pass


class ElementNotFoundError(HarnessError):
    """No candidate selector produced a visible element."""

    def __init__(self, what: str, candidates):
        self.what = what
        self.candidates = list(candidates)
        tried = ", ".join(str(c) for c in self.candidates) or "(none)"
        super().__init__(f"No {what} found on the page (tried: {tried})")


class OutputMismatchError(HarnessError, AssertionError):
    """Rendered output did not match the expectation."""

    def __init__(self, actual: str, expected, missing: str | None = None):
        self.actual = actual
        self.expected = expected
        self.missing = missing
        if missing is not None:
            msg = f"Expected output to contain {missing!r}, got {actual!r}"
        else:
            msg = f"Expected output {expected!r}, got {actual!r}"
        super().__init__(msg)


class RetriesExhaustedError(HarnessError):
    """Every attempt of a test failed."""

    def __init__(self, test_id: str, attempts: int, last_error: BaseException, outcome=None):
        self.test_id = test_id
        self.attempts = attempts
        self.last_error = last_error
        self.outcome = outcome
        super().__init__(f"{test_id} failed after {attempts} attempt(s): {last_error}")
