"""Classification and conversion of ASCII and Unicode code points."""

from __future__ import annotations

_BASE36_MAP = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check(code_point: int) -> int:
    if not 0 <= code_point < 1 << 32:
        raise ValueError(f"code point out of range: {code_point}")
    return code_point


def is_ascii(code_point: int) -> bool:
    return _check(code_point) < 0x80


def is_ascii_digit(code_point: int) -> bool:
    return ord("0") <= _check(code_point) <= ord("9")


def is_ascii_upper_alpha(code_point: int) -> bool:
    return ord("A") <= _check(code_point) <= ord("Z")


def is_ascii_lower_alpha(code_point: int) -> bool:
    return ord("a") <= _check(code_point) <= ord("z")


def is_ascii_alpha(code_point: int) -> bool:
    return is_ascii_lower_alpha(code_point) or is_ascii_upper_alpha(code_point)


def is_ascii_alphanumeric(code_point: int) -> bool:
    return is_ascii_alpha(code_point) or is_ascii_digit(code_point)


def is_ascii_binary_digit(code_point: int) -> bool:
    return _check(code_point) in (ord("0"), ord("1"))


def is_ascii_octal_digit(code_point: int) -> bool:
    return ord("0") <= _check(code_point) <= ord("7")


def is_ascii_hex_digit(code_point: int) -> bool:
    return (
        is_ascii_digit(code_point)
        or ord("A") <= code_point <= ord("F")
        or ord("a") <= code_point <= ord("f")
    )


def is_ascii_blank(code_point: int) -> bool:
    return _check(code_point) in (ord("\t"), ord(" "))


def is_ascii_space(code_point: int) -> bool:
    return _check(code_point) in (ord(" "), ord("\t"), ord("\n"), ord("\v"), ord("\f"), ord("\r"))


def is_ascii_punctuation(code_point: int) -> bool:
    cp = _check(code_point)
    return 0x21 <= cp <= 0x2F or 0x3A <= cp <= 0x40 or 0x5B <= cp <= 0x60 or 0x7B <= cp <= 0x7E


def is_ascii_graphical(code_point: int) -> bool:
    return 0x21 <= _check(code_point) <= 0x7E


def is_ascii_printable(code_point: int) -> bool:
    return 0x20 <= _check(code_point) <= 0x7E


def is_ascii_c0_control(code_point: int) -> bool:
    return _check(code_point) < 0x20


def is_ascii_control(code_point: int) -> bool:
    return is_ascii_c0_control(code_point) or code_point == 0x7F


def is_unicode(code_point: int) -> bool:
    return _check(code_point) <= 0x10FFFF


def is_unicode_control(code_point: int) -> bool:
    return is_ascii_c0_control(code_point) or 0x7E <= code_point <= 0x9F


def is_unicode_surrogate(code_point: int) -> bool:
    return 0xD800 <= _check(code_point) <= 0xDFFF


def is_unicode_scalar_value(code_point: int) -> bool:
    return is_unicode(code_point) and not is_unicode_surrogate(code_point)


def is_unicode_noncharacter(code_point: int) -> bool:
    return is_unicode(code_point) and (
        0xFDD0 <= code_point <= 0xFDEF
        or (code_point & 0xFFFE) == 0xFFFE
        or (code_point & 0xFFFF) == 0xFFFF
    )


def to_ascii_lowercase(code_point: int) -> int:
    if is_ascii_upper_alpha(code_point):
        return code_point + 0x20
    return code_point


def to_ascii_uppercase(code_point: int) -> int:
    if is_ascii_lower_alpha(code_point):
        return code_point - 0x20
    return code_point


def parse_ascii_digit(code_point: int) -> int:
    """Value of a decimal digit code point."""
    if is_ascii_digit(code_point):
        return code_point - ord("0")
    raise ValueError(f"not an ASCII digit: {code_point:#x}")


def parse_ascii_hex_digit(code_point: int) -> int:
    """Value of a hexadecimal digit code point."""
    if is_ascii_digit(code_point):
        return parse_ascii_digit(code_point)
    if ord("A") <= code_point <= ord("F"):
        return code_point - ord("A") + 10
    if ord("a") <= code_point <= ord("f"):
        return code_point - ord("a") + 10
    raise ValueError(f"not an ASCII hex digit: {code_point:#x}")


def parse_ascii_base36_digit(code_point: int) -> int:
    """Value of a base-36 digit code point."""
    if is_ascii_digit(code_point):
        return parse_ascii_digit(code_point)
    if ord("A") <= code_point <= ord("Z"):
        return code_point - ord("A") + 10
    if ord("a") <= code_point <= ord("z"):
        return code_point - ord("a") + 10
    raise ValueError(f"not an ASCII base-36 digit: {code_point:#x}")


def to_ascii_base36_digit(digit: int) -> int:
    """Lowercase code point of a base-36 digit value."""
    if not 0 <= digit < len(_BASE36_MAP):
        raise ValueError(f"base-36 digit out of range: {digit}")
    return ord(_BASE36_MAP[digit])