"""The ``printf`` flags that rewrite a specifier's converted text."""

from __future__ import annotations

import re

from wirekit.printf_spec import DataType, FormatSpec, find_char

_NIL = "(nil)"
_NULL = "(null)"
_HEX_TYPES = (DataType.LOWER_HEX, DataType.UPPER_HEX)
_SIGNED_TYPES = (DataType.INT, DataType.EXPANDED_BASE_INT, DataType.POINTER)
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    """Leading integer of ``text`` after optional blanks and sign, or 0."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _content(spec: FormatSpec) -> str:
    if spec.out is None:
        raise ValueError("specifier has no content to modify")
    return spec.out


def _store(spec: FormatSpec, text: str) -> None:
    spec.out = text
    spec.out_len = len(text)


def contains_nil(s: str) -> bool:
    """True when the characters of ``(nil)`` appear in ``s`` in order."""
    remaining = iter(s)
    return all(ch in remaining for ch in _NIL)


def _precision_string(spec: FormatSpec, limit: int) -> None:
    if limit >= spec.out_len or spec.out_len == 0 or limit < 0:
        return
    _store(spec, spec.out[:limit])


def _precision_pointer(spec: FormatSpec, limit: int) -> None:
    content = spec.out
    if contains_nil(content):
        return
    digits = content[content.find("x") + 1 :]
    if limit <= len(digits):
        return
    _store(spec, "0x" + "0" * (limit - len(digits)) + digits)


def _precision_number(spec: FormatSpec, limit: int) -> None:
    content = spec.out
    if limit == 0:
        if content.startswith("0"):
            _store(spec, "")
        return
    minus = 1 if "-" in content else 0
    digits = spec.out_len - minus
    if limit <= digits:
        return
    zeros = "0" * (limit - digits)
    _store(spec, "-" + zeros + content[1:] if minus else zeros + content)


def apply_precision(spec: FormatSpec) -> None:
    """Truncate strings or zero-extend numbers to the precision after the ``.``."""
    content = _content(spec)
    dot = find_char(spec.directive, ".", 0)
    limit = _atoi(spec.directive[dot + 1 :])
    if content == _NULL:
        if limit < len(_NULL):
            _store(spec, "")
        return
    if spec.data_type is DataType.STRING:
        _precision_string(spec, limit)
    elif spec.data_type is DataType.POINTER:
        _precision_pointer(spec, limit)
    else:
        _precision_number(spec, limit)


def apply_fill_zero(spec: FormatSpec) -> None:
    """Pad with zeros after any sign or ``0x`` up to the width in the directive.

    A nil pointer or an active precision hands the padding to the field width.
    """
    content = _content(spec)
    if content == _NIL or spec.flags.precision == 1:
        spec.flags.field_width = 1
        return
    zeros = _atoi(spec.directive[1:]) - spec.out_len
    if zeros < 1:
        return
    is_pointer = spec.data_type is DataType.POINTER
    skip = 2 if is_pointer else 0
    if content.startswith("-"):
        padded = "-" + "0" * zeros + content[skip + 1 :]
    else:
        padded = "0" * zeros + content[skip:]
    _store(spec, "0x" + padded if is_pointer else padded)


def apply_force_plus(spec: FormatSpec) -> None:
    """Prefix ``+`` unless the text is a nil pointer or already has a minus sign."""
    content = _content(spec)
    if content == _NIL or "-" in content:
        return
    _store(spec, "+" + content)


def apply_prefix(spec: FormatSpec) -> None:
    """Prefix ``0x`` or ``0X`` to a non-zero hexadecimal value."""
    content = _content(spec)
    if spec.data_type not in _HEX_TYPES:
        return
    if spec.out_len == 0 or set(content) <= {"0"} or contains_nil(content):
        return
    prefix = "0x" if spec.data_type is DataType.LOWER_HEX else "0X"
    _store(spec, prefix + content)


def _last_minus_index(directive: str) -> int:
    index = directive.rfind("-", 1)
    if index == -1:
        index = 0
    while index + 1 < len(directive) and not (
        directive[index + 1].isdigit() or directive[index + 1] == "."
    ):
        index += 1
    return index


def apply_alignment(spec: FormatSpec) -> None:
    """Left-justify the text by padding spaces on the right."""
    content = _content(spec)
    directive = spec.directive
    if spec.data_type is DataType.CHAR and spec.flags.force_plus_sign == -1:
        width = _atoi(directive[find_char(directive, "+", 1) + 1 :])
    else:
        width = _atoi(directive[_last_minus_index(directive) + 1 :])
    modifier = (
        1
        if spec.flags.insert_space == 1 and _atoi(content) >= 0 and content != _NIL
        else 0
    )
    pad = width - spec.out_len - modifier
    if pad <= 0:
        return
    _store(spec, content + " " * pad)


def apply_insert_space(spec: FormatSpec) -> None:
    """Prefix a space where a sign would go; negative numbers are left alone."""
    content = _content(spec)
    if contains_nil(content) or (
        spec.flags.precision == 1 and spec.data_type not in _SIGNED_TYPES
    ):
        spec.flags.insert_space = -1
        return
    if "-" in content and spec.data_type is not DataType.STRING:
        return
    spec.flags.field_width = 1
    _store(spec, " " + content)