import pytest

from wirekit.printf import apply_flags, printf, resolve_flag_conflicts, sprintf
from wirekit.printf_convert import convert_argument
from wirekit.printf_spec import parse_specifiers


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("plain text", ()),
        ("%d", (42,)),
        ("%d", (-42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (42,)),
        ("%05d", (-42,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%+d", (5,)),
        ("%+d", (-5,)),
        ("% d", (5,)),
        ("%.3s", ("hello",)),
        ("%.5d", (42,)),
        ("%8.3d", (42,)),
        ("%c", (65,)),
        ("%u", (7,)),
        ("%s", ("hi",)),
        ("%10s", ("hi",)),
        ("%-10s|", ("hi",)),
        ("100%%", ()),
        ("%d and %s", (7, "x")),
        ("%5d|%-3s|", (1, "a")),
        ("%-05d", (42,)),
        ("% +d", (5,)),
    ],
)
def test_sprintf_matches_standard_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_null_string_and_nil_pointer():
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_has_hex_prefix():
    assert sprintf("%p", 255) == "%#x" % 255


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_unterminated_specifier_raises():
    with pytest.raises(ValueError):
        sprintf("abc %")


def test_none_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_returns_length(capsys):
    count = printf("%s=%d\n", "n", 3)
    captured = capsys.readouterr()
    assert captured.out == sprintf("%s=%d\n", "n", 3)
    assert count == len(captured.out)


def test_resolve_alignment_overrides_zero_fill():
    spec = parse_specifiers("%-05d")[0]
    assert spec.flags.fill_zero == 1
    resolve_flag_conflicts(spec)
    assert spec.flags.fill_zero == -1


def test_resolve_disables_incompatible_flags():
    char_spec = parse_specifiers("%.3c")[0]
    resolve_flag_conflicts(char_spec)
    assert char_spec.flags.precision == -1

    int_spec = parse_specifiers("%#d")[0]
    resolve_flag_conflicts(int_spec)
    assert int_spec.flags.prefix == -1

    str_spec = parse_specifiers("%+s")[0]
    resolve_flag_conflicts(str_spec)
    assert str_spec.flags.force_plus_sign == -1


def test_resolve_plus_beats_space():
    spec = parse_specifiers("% +d")[0]
    resolve_flag_conflicts(spec)
    assert spec.flags.insert_space == -1
    assert spec.flags.force_plus_sign == 1


def test_apply_flags_rewrites_output():
    spec = parse_specifiers("%+d")[0]
    convert_argument(spec, 3)
    apply_flags(spec)
    assert spec.out == "%+d" % 3


def test_apply_flags_width():
    spec = parse_specifiers("%6x")[0]
    convert_argument(spec, 171)
    apply_flags(spec)
    assert spec.out == "%6x" % 171
    assert spec.out_len == len(spec.out)