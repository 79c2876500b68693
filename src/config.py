"""Configuration for translator test runs."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_URL = "https://www.swifttranslator.com/"
DEFAULT_ARTIFACTS_DIR = Path("data/debug")


class Timeouts:
    """Wait constants in milliseconds."""

    NAVIGATION = 60000
    NETWORK_IDLE = 15000
    LOADING_HIDDEN = 5000
    PAGE_SETTLE = 1000  # after navigation and reload
    PRE_PROBE = 500  # before probing for the input control
    FOCUS = 200  # after focusing or clearing the input
    SETTLE = 1500  # after fill, before reading output
    OUTPUT_WAIT = 1000  # inside the output reader
    CLEAR_SETTLE = 1000  # after clicking a clear control


def _env_bool(name: str, default: bool) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


@dataclass
class HarnessConfig:
    base_url: str = DEFAULT_URL
    headless: bool = True
    verbose: bool = False
    settle_ms: int = Timeouts.SETTLE
    max_retries: int = 3
    # Debug screenshots land here
    artifacts_dir: Path = DEFAULT_ARTIFACTS_DIR

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        return cls(
            base_url=os.environ.get("TRANSLATOR_URL", DEFAULT_URL),
            headless=_env_bool("HEADLESS", True),
            verbose=_env_bool("VERBOSE", False),
            settle_ms=_env_int("SETTLE_MS", Timeouts.SETTLE),
            max_retries=max(1, _env_int("MAX_RETRIES", 3)),
            artifacts_dir=Path(os.environ.get("ARTIFACTS_DIR", DEFAULT_ARTIFACTS_DIR)),
        )
