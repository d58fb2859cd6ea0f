"""Consistency checks for brace-style format strings against an argument count."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

MAX_USED_ARGUMENTS = 128
MAX_NESTING = 3


class FormatStringError(ValueError):
    """A format string that does not match its arguments."""


@dataclass
class FormatParams:
    """What a scan of a format string found."""

    used_arguments: list[int] = field(default_factory=list)
    next_implicit_argument_index: int = 0
    has_explicit_argument_references: bool = False
    unclosed_braces: int = 0
    extra_closed_braces: int = 0
    nesting_level: int = 0

    @property
    def total_used_argument_count(self) -> int:
        return len(self.used_arguments)


def _leading_index(spec: str) -> Optional[int]:
    digits = len(spec) - len(spec.lstrip("0123456789"))
    return int(spec[:digits]) if digits else None


def count_fmt_params(fmt: str) -> FormatParams:
    """Scan fmt, recording which argument each replacement field uses.

    ``{{`` is an escaped brace anywhere, ``}}`` only outside a field.
    """
    result = FormatParams()
    specifier_starts: list[int] = []
    length = len(fmt)
    i = 0
    while i < length:
        ch = fmt[i]
        following = fmt[i + 1] if i + 1 < length else ""
        if ch == "{":
            if following == "{":
                i += 2
                continue
            if len(specifier_starts) >= MAX_NESTING:
                raise FormatStringError("Format specifier nested too deep")
            specifier_starts.append(i + 1)
            result.unclosed_braces += 1
            result.nesting_level += 1
        elif ch == "}":
            if result.nesting_level == 0 and following == "}":
                i += 2
                continue
            if result.unclosed_braces:
                result.nesting_level -= 1
                result.unclosed_braces -= 1
                if not specifier_starts:
                    raise FormatStringError("Expected location information")
                start = specifier_starts.pop()
                if len(result.used_arguments) >= MAX_USED_ARGUMENTS:
                    raise FormatStringError("Too many format arguments in format string")
                index = _leading_index(fmt[start:i])
                if index is None:
                    index = result.next_implicit_argument_index
                    result.next_implicit_argument_index += 1
                if index + 1 != result.next_implicit_argument_index:
                    result.has_explicit_argument_references = True
                result.used_arguments.append(index)
            else:
                result.extra_closed_braces += 1
        i += 1
    return result


def check_format_parameter_consistency(fmt: str, param_count: int) -> bool:
    """Raise FormatStringError unless fmt uses exactly the param_count arguments."""
    check = count_fmt_params(fmt)
    if check.unclosed_braces != 0:
        raise FormatStringError("Extra unclosed braces in format string")
    if check.extra_closed_braces != 0:
        raise FormatStringError("Extra closing braces in format string")
    if any(entry >= param_count for entry in check.used_arguments):
        raise FormatStringError("Format string references nonexistent parameter")
    if not check.has_explicit_argument_references:
        if check.total_used_argument_count != param_count:
            raise FormatStringError("Format string does not reference all passed parameters")
    elif not set(range(param_count)) <= set(check.used_arguments):
        raise FormatStringError("Format string does not reference all passed parameters")
    return True


class CheckedFormatString:
    """A format string, checked against an argument count when one is given."""

    __slots__ = ("_string",)

    def __init__(self, fmt: str, param_count: Optional[int] = None) -> None:
        if param_count is not None:
            check_format_parameter_consistency(fmt, param_count)
        self._string = fmt

    def view(self) -> str:
        return self._string

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"CheckedFormatString({self._string!r})"