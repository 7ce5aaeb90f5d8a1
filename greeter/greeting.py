"""Greeting text rendering.

The body mirrors the two example servers this service grew out of: a static
greeting line, then the execution environment, the current time and the
user-supplied variable, one per line.
"""

import threading
from datetime import datetime, timezone
from typing import Callable, Protocol

UNSET = "undefined"

GREETINGS = {
    "aws-resources": "Hello World!",
    "terraform-aws-modules": 'This "Hello world!" is powered by Terraform AWS Modules!',
}


class GreetingConfig(Protocol):
    greeting_line: str
    node_env: str | None
    my_input_env_var: str | None


def format_timestamp(moment: datetime) -> str:
    """UTC ISO 8601 with milliseconds and a trailing Z, e.g. 2026-10-19T08:15:30.123Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _display(value: str | None) -> str:
    return UNSET if value is None else value


class UtcClock:
    """UTC wall clock that never hands out a time earlier than a previous one."""

    def __init__(self, source: Callable[[], datetime] | None = None):
        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source()
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
            return current


def render_greeting(config: GreetingConfig, moment: datetime) -> str:
    """Render the plain-text greeting body.

    Unset variables show as ``undefined``; set values (including the empty
    string) are echoed verbatim.
    """
    lines = [
        config.greeting_line,
        f"The NODE_ENV is {_display(config.node_env)}.",
        f"Datetime now: {format_timestamp(moment)}.",
        f"The MY_INPUT_ENV_VAR is {_display(config.my_input_env_var)}.",
    ]
    return "\n".join(lines) + "\n"
