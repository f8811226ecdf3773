"""Formatted output in the style of the C ``printf`` family."""

from __future__ import annotations

import sys

from wirekit.printf_convert import convert_argument
from wirekit.printf_flags import (
    apply_alignment,
    apply_fill_zero,
    apply_force_plus,
    apply_insert_space,
    apply_precision,
    apply_prefix,
)
from wirekit.printf_spec import DataType, FormatSpec, apply_width, parse_specifiers

_NO_ZERO_FILL = (
    DataType.STRING,
    DataType.CHAR,
    DataType.PERCENT_SIGN,
    DataType.POINTER,
)
_NO_PRECISION = (DataType.CHAR, DataType.PERCENT_SIGN)
_HEX_TYPES = (DataType.LOWER_HEX, DataType.UPPER_HEX)
_SIGNED_TYPES = (DataType.INT, DataType.EXPANDED_BASE_INT, DataType.POINTER)

# Order in which active flags rewrite the converted text.
_APPLIERS = (
    ("precision", apply_precision),
    ("fill_zero", apply_fill_zero),
    ("force_plus_sign", apply_force_plus),
    ("prefix", apply_prefix),
    ("alignment", apply_alignment),
    ("insert_space", apply_insert_space),
    ("field_width", apply_width),
)


def _has_flags(spec: FormatSpec) -> bool:
    flags = spec.flags
    return any(
        (
            flags.alignment,
            flags.fill_zero,
            flags.precision,
            flags.prefix,
            flags.force_plus_sign,
            flags.insert_space,
        )
    )


def resolve_flag_conflicts(spec: FormatSpec) -> None:
    """Switch off flags that a stronger flag overrides or the data type cannot use."""
    flags = spec.flags
    if flags.alignment and flags.fill_zero:
        flags.fill_zero = -1
    if flags.precision and flags.fill_zero:
        flags.fill_zero = -1
        flags.field_width = 1
    if flags.force_plus_sign and flags.insert_space:
        flags.insert_space = -1
    data_type = spec.data_type
    if flags.fill_zero and data_type in _NO_ZERO_FILL:
        flags.fill_zero = -1
        spec.check_width()
    if flags.precision and data_type in _NO_PRECISION:
        flags.precision = -1
    if flags.prefix and data_type not in _HEX_TYPES:
        flags.prefix = -1
    if flags.force_plus_sign and data_type not in _SIGNED_TYPES:
        flags.force_plus_sign = -1
    if flags.insert_space and data_type not in _SIGNED_TYPES:
        flags.insert_space = -1


def apply_flags(spec: FormatSpec) -> None:
    """Run every active flag over the converted text of ``spec``, in a fixed order."""
    for name, applier in _APPLIERS:
        if getattr(spec.flags, name) == 1:
            applier(spec)


def _settle_length(spec: FormatSpec) -> None:
    text = spec.out or ""
    if text and not text.startswith("\0") and spec.flags.field_width != 1:
        spec.out_len = len(text.partition("\0")[0])


def _assemble(fmt: str, specs: list[FormatSpec]) -> str:
    pieces: list[str] = []
    position = 0
    for spec in specs:
        pieces.append(fmt[position : spec.start_idx])
        pieces.append((spec.out or "")[: spec.out_len])
        position = spec.end_idx + 1
    pieces.append(fmt[position:])
    return "".join(pieces)


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Raises ``ValueError`` for a ``%`` without a conversion character and
    ``TypeError`` when there are fewer arguments than conversions.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    specs = parse_specifiers(fmt)
    remaining = iter(args)
    for index, spec in enumerate(specs):
        if _has_flags(spec):
            for later in specs[index:]:
                resolve_flag_conflicts(later)
        if spec.data_type is DataType.PERCENT_SIGN:
            arg = None
        else:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
        convert_argument(spec, arg)
        apply_flags(spec)
        _settle_length(spec)
    return _assemble(fmt, specs)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)