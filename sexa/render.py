"""
Rendering of sexagesimal values from a parsed Directive.

render() is the programmatic entry point and returns (text, error). Values that can
not be expressed in the requested format produce a run of asterisks filling the
field, and the error describing why is returned alongside instead of raised.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import replace

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import SexaOverflowError, WidthOverflowError
from .segments import MAX_PRECISION, Segments, decompose
from .specifier import DecimalUnit, Directive, SignPolicy
from .symbols import Symbols, get_symbols

OVERFLOW_CHAR = "*"

_SIGNS = {
    SignPolicy.ALWAYS: "+",
    SignPolicy.SPACE: " ",
    SignPolicy.NEGATIVE: "",
}


# Methods --------------------------------------------------------------------------------------------------------------

def render(
        x: float,
        directive: Directive,
        *,
        hours: bool = False,
        symbols: Symbols | None = None,
) -> tuple[str, SexaOverflowError | None]:
    """
    Format x as sexagesimal text.

    Args:
        x: Value in display units, degrees or hours.
        directive: Parsed format specifier, see parse_spec().
        hours: Use hour-minute-second units instead of degree-minute-second.
        symbols: Unit glyphs and decimal separators, None for DEFAULT_SYMBOLS.

    Returns:
        (text, None) on success. On overflow, text is all asterisks filling the field
        and the second item is a WidthOverflowError, PrecisionOverflowError or NonFiniteError.

    Examples:
        >>> render(23.445556, parse_spec("03s"))
        (' 023°26′44″', None)
        >>> render(4423.0, parse_spec("03s"))
        ('***********', WidthOverflowError('Degrees overflow width'))
        >>> render(-12.579333, parse_spec(".1d"), hours=True)
        ('-12ʰ34ᵐ45ˢ.6', None)
    """
    sym = get_symbols(symbols)

    try:
        segments = decompose(x, directive.segments, directive.precision)
    except SexaOverflowError as exc:
        return overflow_marker(directive, hours=hours, symbols=sym), exc

    if directive.fixed_width and len(str(segments.first)) > directive.width:
        err = WidthOverflowError(f"{'Hours' if hours else 'Degrees'} overflow width")
        return overflow_marker(directive, hours=hours, symbols=sym), err

    return _compose(segments, directive, sym.hms_units if hours else sym.dms_units, sym), None


def overflow_marker(directive: Directive, *, hours: bool = False, symbols: Symbols | None = None) -> str:
    """
    Asterisks as wide as the field directive produces.

    The width is that of a zero value with all segments shown, so for fixed width
    formats it matches any value that fits the field. Precision beyond MAX_PRECISION
    can never fit and is drawn as MAX_PRECISION digits.
    """
    sym = get_symbols(symbols)
    zero = Segments(
        negative=False,
        values=(0,) * directive.segments,
        fraction=0,
        precision=min(directive.precision, MAX_PRECISION),
    )
    text = _compose(zero, replace(directive, show_all=True), sym.hms_units if hours else sym.dms_units, sym)
    return OVERFLOW_CHAR * len(text)


# Private methods ------------------------------------------------------------------------------------------------------

def _compose(segments: Segments, directive: Directive, units: tuple[str, str, str], sym: Symbols) -> str:
    sign = "-" if segments.negative else _SIGNS[directive.sign]
    values = segments.values
    last = len(values) - 1

    # Leading zero segments are elided, the last segment always prints
    start = 0
    if not directive.show_all:
        while start < last and values[start] == 0:
            start += 1

    parts = []
    for i in range(start, last + 1):
        if i == start:
            digits = _first_digits(values[i], sign, directive)
        elif directive.zero_pad or directive.fixed_width:
            digits = f"{values[i]:02d}"
        else:
            digits = str(values[i])

        if i < last:
            parts.append(digits + units[i])
        else:
            parts.append(_attach_unit(digits, segments.fraction_str, units[i], directive.convention, sym))

    text = "".join(parts)
    if directive.fixed_width and directive.segments == 1 and not directive.zero_pad:
        # Sign already placed inside the space padding
        return text
    return sign + text


def _first_digits(value: int, sign: str, directive: Directive) -> str:
    digits = str(value)
    if not directive.fixed_width:
        return digits
    if directive.zero_pad:
        return digits.zfill(directive.width)
    if directive.segments == 1:
        # Decimal hours or degrees: sign immediately in front of the number
        return (sign + digits).rjust(directive.width + len(sign))
    return digits.rjust(directive.width)


def _attach_unit(digits: str, fraction: str, unit: str, convention: DecimalUnit, sym: Symbols) -> str:
    if not fraction:
        return digits + unit

    numeral = digits + sym.dec_sep + fraction
    if convention == DecimalUnit.COMBINED:
        return sym.combine_unit(numeral, unit)
    if convention == DecimalUnit.INSERTED:
        return sym.insert_unit(numeral, unit)
    return numeral + unit
