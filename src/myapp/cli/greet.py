"""``myapp greet`` — print a styled greeting one or more times."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from myapp.cli import exit_codes
from myapp.cli.console import stdout
from myapp.core.greeting import build_greetings
from myapp.core.models import (
    CommandNode,
    GreetingStyle,
    OptionKind,
    OptionSpec,
    ParameterSpec,
)


def run_greet(values: Mapping[str, Any]) -> int:
    stdout.lines(
        build_greetings(
            values["name"],
            values["style"],
            values["count"],
            include_time=values["time"],
            uppercase=values["uppercase"],
        )
    )
    return exit_codes.SUCCESS


GREET = CommandNode(
    name="greet",
    description="Greet someone with various options",
    action=run_greet,
    parameters=(
        ParameterSpec("name", default="World", help="Name to greet"),
    ),
    options=(
        OptionSpec(("-u", "--uppercase"), "uppercase", help="Print greeting in uppercase"),
        OptionSpec(("-t", "--time"), "time", help="Include current time"),
        OptionSpec(
            ("-c", "--count"),
            "count",
            kind=OptionKind.INTEGER,
            default=1,
            help="Number of times to greet",
        ),
        OptionSpec(
            ("-s", "--style"),
            "style",
            kind=OptionKind.ENUM,
            choices=GreetingStyle,
            default=GreetingStyle.FRIENDLY,
            help="Greeting style: FORMAL, CASUAL, FRIENDLY, EXCITED",
        ),
    ),
)
