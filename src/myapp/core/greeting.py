"""Pure greeting text construction.

No I/O and no clock access unless the caller omits *now*; tests pass a
fixed :class:`~datetime.datetime` for deterministic output.
"""

from __future__ import annotations

from datetime import datetime

from myapp.core.models import GreetingStyle

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_TEMPLATES: dict[GreetingStyle, str] = {
    GreetingStyle.FORMAL: "Good day, {name}.",
    GreetingStyle.CASUAL: "Hey {name}!",
    GreetingStyle.FRIENDLY: "Hello {name}, nice to meet you!",
    GreetingStyle.EXCITED: "WOW! Hi there {name}! \N{PARTY POPPER}",
}


def build_greeting(
    name: str,
    style: GreetingStyle,
    *,
    include_time: bool = False,
    uppercase: bool = False,
    now: datetime | None = None,
) -> str:
    """Return one greeting line for *name* in *style*.

    With *include_time* the line ends with `` (at YYYY-MM-DD HH:MM:SS)``.
    *uppercase* is applied last, so it covers the timestamp suffix too.
    """
    greeting = _TEMPLATES[style].format(name=name)
    if include_time:
        stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        greeting += f" (at {stamp})"
    return greeting.upper() if uppercase else greeting


def build_greetings(
    name: str,
    style: GreetingStyle,
    count: int,
    *,
    include_time: bool = False,
    uppercase: bool = False,
    now: datetime | None = None,
) -> list[str]:
    """Return *count* identical greeting lines (none when ``count <= 0``)."""
    if count <= 0:
        return []
    line = build_greeting(
        name,
        style,
        include_time=include_time,
        uppercase=uppercase,
        now=now,
    )
    return [line] * count
