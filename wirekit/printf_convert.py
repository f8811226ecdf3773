"""Turning a single ``printf`` argument into its raw, unflagged text."""

from __future__ import annotations

import operator

from wirekit.printf_spec import DataType, FormatSpec

_UINT32_MASK = 0xFFFF_FFFF
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF
_INT32_SIGN = 0x8000_0000
_BYTE_MASK = 0xFF

_NULL_STRING = "(null)"
_NIL_POINTER = "(nil)"
_POINTER_PREFIX = "0x"


def unsigned_to_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``number`` taken as a 32-bit unsigned integer."""
    value = operator.index(number) & _UINT32_MASK
    return format(value, "X" if upper else "x")


def pointer_to_hex(number: int) -> str:
    """Lower-case hexadecimal digits of ``number`` taken as a 64-bit address."""
    value = operator.index(number) & _UINT64_MASK
    return format(value, "x")


def unsigned_to_decimal(n: int) -> str:
    """Decimal digits of ``n`` taken as a 32-bit unsigned integer."""
    return str(operator.index(n) & _UINT32_MASK)


def _as_int32(value: object) -> int:
    wrapped = operator.index(value) & _UINT32_MASK
    return wrapped - (1 << 32) if wrapped & _INT32_SIGN else wrapped


def _char_text(arg: object) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("a %c argument must be a single character")
        return arg
    return chr(operator.index(arg) & _BYTE_MASK)


def _string_text(arg: object) -> str:
    if arg is None:
        return _NULL_STRING
    if not isinstance(arg, str):
        raise TypeError("a %s argument must be a string or None")
    return arg


def _pointer_text(arg: object) -> str:
    if arg is None:
        return _NIL_POINTER
    address = operator.index(arg) & _UINT64_MASK
    if address == 0:
        return _NIL_POINTER
    return _POINTER_PREFIX + pointer_to_hex(address)


def _raw_text(data_type: DataType, arg: object) -> str:
    if data_type is DataType.CHAR:
        return _char_text(arg)
    if data_type is DataType.STRING:
        return _string_text(arg)
    if data_type is DataType.POINTER:
        return _pointer_text(arg)
    if data_type in (DataType.INT, DataType.EXPANDED_BASE_INT):
        return str(_as_int32(arg))
    if data_type is DataType.UNSIGNED_INT:
        return unsigned_to_decimal(arg)
    if data_type is DataType.LOWER_HEX:
        return unsigned_to_hex(arg, upper=False)
    if data_type is DataType.UPPER_HEX:
        return unsigned_to_hex(arg, upper=True)
    return "%"


def convert_argument(spec: FormatSpec, arg: object = None) -> str:
    """Fill ``spec.out`` and ``spec.out_len`` with the raw text of ``arg``.

    A ``%%`` specifier ignores ``arg``. A ``%c`` of the NUL character still
    counts as one character of output. Returns the text stored in ``spec.out``.
    """
    text = _raw_text(spec.data_type, arg)
    spec.out = text
    spec.out_len = len(text)
    return text