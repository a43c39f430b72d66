#
# Sexa - Render Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from sexa.errors import NonFiniteError, PrecisionOverflowError, WidthOverflowError
from sexa.render import OVERFLOW_CHAR, overflow_marker, render
from sexa.specifier import Directive, SignPolicy, parse_spec

DOT_BELOW = "\u0323"

OBLIQUITY = 23 + 26/60 + 44/3600
PRECISE = 1 + 23/60 + 45.6/3600


def fmt(x: float, spec: str, **kwargs) -> str:
    text, err = render(x, parse_spec(spec), **kwargs)
    assert err is None, err
    return text


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRenderBasic:

    # @formatter:off
    @pytest.mark.parametrize(
        "x, spec, expected",
        [
            pytest.param(OBLIQUITY,           "s",    "23°26′44″",    id="s"),
            pytest.param(OBLIQUITY,           "",     "23°26′44″",    id="empty"),
            pytest.param(OBLIQUITY,           "v",    "23°26′44″",    id="v"),
            pytest.param(180.0,               "s",    "180°0′0″",     id="zero_lower_segments"),
            pytest.param(-(13 + 47/60 + 22/3600), "s", "-13°47′22″",  id="negative"),
            pytest.param(OBLIQUITY,           "03s",  " 023°26′44″",  id="zero_pad_width"),
            pytest.param(OBLIQUITY,           "+s",   "+23°26′44″",   id="plus"),
            pytest.param(OBLIQUITY,           " s",   " 23°26′44″",   id="space"),
            pytest.param(0.089876,            ".6h",  "0.089876°",    id="decimal_degrees"),
        ],
    )
    # @formatter:on
    def test_degrees(self, x, spec, expected):
        assert fmt(x, spec) == expected

    def test_hours(self):
        assert fmt(-(12 + 34/60 + 45.6/3600), "s", hours=True) == "-12ʰ34ᵐ46ˢ"
        assert fmt(15 + 22/60 + 7/3600, "0s", hours=True) == "15ʰ22ᵐ07ˢ"


class TestDecimalUnit:

    # @formatter:off
    @pytest.mark.parametrize(
        "spec, expected",
        [
            pytest.param(".1s", "1°23′45.6″",               id="s"),
            pytest.param(".1c", "1°23′45″" + DOT_BELOW + "6", id="c"),
            pytest.param(".1d", "1°23′45″.6",               id="d"),
            pytest.param(".2m", "1°23.76′",                 id="m"),
            pytest.param(".2n", "1°23′" + DOT_BELOW + "76",  id="n"),
            pytest.param(".2o", "1°23′.76",                 id="o"),
            pytest.param(".3h", "1.396°",                   id="h"),
            pytest.param(".3i", "1°" + DOT_BELOW + "396",    id="i"),
            pytest.param(".3j", "1°.396",                   id="j"),
        ],
    )
    # @formatter:on
    def test_conventions(self, spec, expected):
        assert fmt(PRECISE, spec) == expected

    def test_hours_inserted(self):
        assert fmt(-(12 + 34/60 + 45.6/3600), ".1d", hours=True) == "-12ʰ34ᵐ45ˢ.6"

    def test_zero_precision_has_no_separator(self):
        assert fmt(PRECISE, ".0d") == "1°23′46″"
        assert fmt(PRECISE, ".c") == "1°23′46″"


class TestElision:

    @pytest.mark.parametrize(
        "x, spec, expected",
        [
            pytest.param(5/3600, "s", "5″", id="seconds_only"),
            pytest.param(5/3600, "#s", "0°0′5″", id="show_all"),
            pytest.param(5/3600, "0s", "5″", id="zero_pad_first_unpadded"),
            pytest.param(5/3600, "#0s", "0°00′05″", id="show_all_zero_pad"),
            pytest.param(5/60, "s", "5′0″", id="minutes_first"),
            pytest.param(5/60, "0s", "5′00″", id="minutes_first_zero_pad"),
            pytest.param(0.0, "s", "0″", id="zero"),
            pytest.param(0.0, "m", "0′", id="zero_minutes"),
            pytest.param(-5/3600, "s", "-5″", id="negative_seconds_only"),
        ],
    )
    def test_leading_zero_segments(self, x, spec, expected):
        assert fmt(x, spec) == expected

    def test_carry_shown_after_elision(self):
        assert fmt(59.6/3600, "s") == "1′0″"


class TestSign:

    def test_negative_rounding_to_zero_unsigned(self):
        assert fmt(-1e-9, "s") == "0″"
        assert fmt(-1e-9, "+s") == "+0″"

    def test_width_one_segment_sign_inside_padding(self):
        assert fmt(-5.5, "3.1h") == "  -5.5°"
        assert fmt(5.5, "3.1h") == "   5.5°"
        assert fmt(5.5, "+3.1h") == "  +5.5°"

    def test_width_one_segment_zero_pad_sign_outside(self):
        assert fmt(-5.5, "03.1h") == "-005.5°"
        assert fmt(5.5, "03.1h") == " 005.5°"

    def test_width_multi_segment_sign_column(self):
        assert fmt(-5.5, "3s") == "-  5°30′00″"
        assert fmt(5.5, "3s") == "   5°30′00″"

    def test_fixed_width_directive(self):
        directive = Directive(width=3, sign=SignPolicy.SPACE)
        assert directive.fixed_width
        assert render(5.5, directive) == ("   5°30′00″", None)
        assert render(5.5, Directive()) == ("5°30′0″", None)

    def test_ra_directive_unsigned(self):
        directive = parse_spec("+2s", ra=True)
        assert render(1.5, directive, hours=True) == (" 1ʰ30ᵐ00ˢ", None)


class TestOverflow:

    def test_width_degrees(self):
        text, err = render(135.0, parse_spec("2s"))
        assert text == "*" * 10
        assert isinstance(err, WidthOverflowError)
        assert str(err) == "Degrees overflow width"

    def test_width_hours(self):
        text, err = render(123.0, parse_spec("2s"), hours=True)
        assert text == "*" * 10
        assert str(err) == "Hours overflow width"

    def test_width_zero_pad(self):
        text, err = render(4423 + 26/60 + 44/3600, parse_spec("03s"))
        assert text == "*" * 11
        assert isinstance(err, WidthOverflowError)

    def test_carry_overflows_width(self):
        text, err = render(99 + 59/60 + 59.99/3600, parse_spec("02s"))
        assert text == "*" * 10
        assert isinstance(err, WidthOverflowError)

    def test_width_one_segment(self):
        text, err = render(1234.5, parse_spec("3.1h"))
        assert text == "*" * 7
        assert isinstance(err, WidthOverflowError)

    def test_precision(self):
        assert render(360.0, parse_spec(".9s"))[1] is None
        text, err = render(360.0, parse_spec(".10s"))
        assert text == "*" * len("0°0′0.0000000000″")
        assert isinstance(err, PrecisionOverflowError)

    def test_huge_precision_marker_bounded(self):
        text, err = render(0.0, parse_spec(".100000000s"))
        assert isinstance(err, PrecisionOverflowError)
        assert text == "*" * len("0°0′0." + "0" * 16 + "″")

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    @pytest.mark.parametrize("spec", ["s", "+03.2m", "#j", "2.1c"])
    def test_non_finite(self, x, spec):
        text, err = render(x, parse_spec(spec))
        assert isinstance(err, NonFiniteError)
        assert text
        assert set(text) == {OVERFLOW_CHAR}
        assert text == overflow_marker(parse_spec(spec))

    def test_nan_marker(self):
        text, err = render(math.nan, parse_spec("s"))
        assert text == "******"
        assert str(err) == "NaN is not a formattable value"

    # @formatter:off
    @pytest.mark.parametrize(
        "spec, length",
        [
            pytest.param("s",     6,  id="s"),
            pytest.param("2s",    10, id="width"),
            pytest.param("03s",   11, id="zero_pad_width"),
            pytest.param("+s",    7,  id="plus"),
            pytest.param("3.1h",  7,  id="one_segment_width"),
            pytest.param(".2m",   7,  id="precision"),
        ],
    )
    # @formatter:on
    def test_marker_length(self, spec, length):
        assert overflow_marker(parse_spec(spec)) == "*" * length

    def test_marker_matches_fixed_width_value(self):
        directive = parse_spec("+03.2c")
        text, err = render(-(7 + 8/60 + 9.25/3600), directive)
        assert err is None
        assert len(overflow_marker(directive)) == len(text)


class TestSymbolsOverride:

    def test_ascii(self, ascii_symbols):
        assert fmt(PRECISE, ".1d", symbols=ascii_symbols) == "1d23m45s.6"
        assert fmt(PRECISE, ".1c", symbols=ascii_symbols) == "1d23m45s.6"
        assert fmt(1.5, "s", hours=True, symbols=ascii_symbols) == "1h30m0s"

    def test_blank_fixed_columns(self, blank_symbols):
        assert fmt(1.25, "02.2j", symbols=blank_symbols) == " 0125"
        assert fmt(1.25, "02.2i", symbols=blank_symbols) == " 0125"

    def test_blank_marker(self, blank_symbols):
        text, err = render(123.0, parse_spec("02.2j"), symbols=blank_symbols)
        assert text == "*" * 5
        assert isinstance(err, WidthOverflowError)

    def test_wrong_symbols_type(self):
        with pytest.raises(TypeError):
            render(1.0, parse_spec("s"), symbols="°")
