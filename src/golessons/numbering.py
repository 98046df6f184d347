"""Chapter and lesson numbering: validation and two-digit padding."""

import re

import click

from golessons.errors import ValidationError

_POSITIVE_INT_PATTERN = re.compile(r"[0-9]+")


def pad2(number: int) -> str:
    """Zero-pad a number to two digits (1 -> "01").

    Numbers of 100 or more come back with three or more digits.
    """
    return f"{number:02d}"


def parse_positive_int(token: str, message: str = "Value must be a positive integer.") -> int:
    """Parse a decimal token that must be strictly positive.

    Only ASCII digits are accepted, so signs, whitespace and the empty
    string are rejected along with zero.

    Raises:
        ValidationError: carrying ``message`` when the token is rejected
    """
    if not _POSITIVE_INT_PATTERN.fullmatch(token) or int(token) <= 0:
        raise ValidationError(message)
    return int(token)


class PositiveInt(click.ParamType):
    """Click parameter type applying parse_positive_int with a per-argument message.

    With ``keep_token`` the validated token is returned as typed (e.g. "02")
    instead of its integer value.
    """

    name = "positive_int"

    def __init__(self, message: str, keep_token: bool = False):
        self._message = message
        self._keep_token = keep_token

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            number = parse_positive_int(value, self._message)
        except ValidationError as exc:
            self.fail(str(exc), param, ctx)
        return value if self._keep_token else number
