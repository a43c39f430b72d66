"""
Unit glyphs and decimal separators for sexagesimal display.

A Symbols table holds the unit indicators for degree-minute-second and
hour-minute-second formats, plus the two decimal separators: a plain one
and a combining form that can be drawn under a unit glyph.

The final segment of a formatted value carries the decimal separator, and the
unit glyph of that segment can be placed three ways:

    following  1°23′45.6″
    combined   1°23′45″̣6    (decimal mark drawn under the unit glyph)
    inserted   1°23′45″.6

The combined form relies on software rendering Unicode "Mn" category marks
correctly; monospace fonts, terminals and code editors often do not.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import unicodedata
import warnings
from dataclasses import dataclass, replace
from typing import Final, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Symbols:
    """
    Symbols for formatting sexagesimal values.

    Attributes:
        dms_units: Glyphs for degrees, minutes and seconds of arc.
        hms_units: Glyphs for hours, minutes and seconds of time.
        dec_sep: Plain decimal separator. An empty string is a valid "no separator"
            mode for fixed columns with an implicit decimal point.
        dec_combine: Combining form of the decimal separator, drawn under a unit glyph.

    Examples:
        >>> Symbols().insert_unit("1.25", "°")
        '1°.25'

        >>> Symbols.ascii().insert_unit("1.25", "d")
        '1d.25'

        >>> Symbols.blank().insert_unit("0125", "°")
        '0125°'
    """
    dms_units: tuple[str, str, str] = ("°", "′", "″")
    hms_units: tuple[str, str, str] = ("ʰ", "ᵐ", "ˢ")
    dec_sep: str = "."
    dec_combine: str = "\u0323"

    def __post_init__(self):
        for name in ("dms_units", "hms_units"):
            units = getattr(self, name)
            if isinstance(units, list):
                units = tuple(units)
                object.__setattr__(self, name, units)
            if not isinstance(units, tuple) or len(units) != 3 or not all(isinstance(u, str) for u in units):
                raise ValueError(f"{name} must be a tuple of 3 strings, got {units!r}")

        for name in ("dec_sep", "dec_combine"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be str, but got {type(getattr(self, name)).__name__}")

        if self.dec_combine and not all(unicodedata.category(c) == "Mn" for c in self.dec_combine):
            warnings.warn(
                f"dec_combine {self.dec_combine!r} is not a combining mark, "
                f"combined verbs will not overlay the decimal separator",
                UserWarning,
                stacklevel=3
            )

    @classmethod
    def unicode(cls) -> Self:
        """
        Unicode unit glyphs: ° ′ ″ and ʰ ᵐ ˢ, with combining dot below U+0323.
        """
        return cls()

    @classmethod
    def ascii(cls) -> Self:
        """
        ASCII-safe glyphs for plain text logs and basic terminals.

        There is no ASCII combining mark, so combined verbs degrade to
        the inserted convention.
        """
        return cls(
            dms_units=("d", "m", "s"),
            hms_units=("h", "m", "s"),
            dec_sep=".",
            dec_combine="",
        )

    @classmethod
    def blank(cls) -> Self:
        """
        All glyphs empty, for fixed columns with implied units and decimal point.
        """
        return cls(
            dms_units=("", "", ""),
            hms_units=("", "", ""),
            dec_sep="",
            dec_combine="",
        )

    def merge(self, **kwargs) -> Self:
        """Copy with the given fields replaced."""
        return replace(self, **kwargs)

    @property
    def glyphs(self) -> frozendict:
        """
        Read-only mapping of glyph roles to glyph text.

        Keys: deg, arcmin, arcsec, hour, min, sec, dec_sep, dec_combine.
        """
        return frozendict(
            deg=self.dms_units[0],
            arcmin=self.dms_units[1],
            arcsec=self.dms_units[2],
            hour=self.hms_units[0],
            min=self.hms_units[1],
            sec=self.hms_units[2],
            dec_sep=self.dec_sep,
            dec_combine=self.dec_combine,
        )

    def combine_unit(self, d: str, unit: str) -> str:
        """
        Replace the decimal separator in d with unit followed by dec_combine.

        If dec_sep is empty or not found in d, unit is appended to d instead.
        Without a dec_combine the plain separator is kept, as insert_unit() does.

        Examples:
            >>> Symbols().combine_unit("1.25", "°")
            '1°̣25'
        """
        if not self.dec_combine:
            return self.insert_unit(d, unit)
        if not self.dec_sep:
            return d + unit
        i = d.find(self.dec_sep)
        if i < 0:
            return d + unit
        return d[:i] + unit + self.dec_combine + d[i + len(self.dec_sep):]

    def insert_unit(self, d: str, unit: str) -> str:
        """
        Insert unit in d immediately before the decimal separator.

        If dec_sep is empty or not found in d, unit is appended to d instead.

        Examples:
            >>> Symbols().insert_unit("1.25", "°")
            '1°.25'
        """
        if not self.dec_sep:
            return d + unit
        i = d.find(self.dec_sep)
        if i < 0:
            return d + unit
        return d[:i] + unit + d[i:]

    def strip_unit(self, d: str, unit: str) -> tuple[str, bool]:
        """
        Reverse combine_unit() or insert_unit() on a single-segment numeral.

        The unit must occur exactly once, with no other unit glyph in d, and be followed
        by dec_combine, by dec_sep, or by nothing at all. A dec_combine is restored to
        dec_sep. The digits before the unit hold no dec_sep.

        Returns:
            (stripped, True) on success, (d, False) if d is not in one of those forms.
            Multi-segment strings and an empty dec_sep are always rejected.

        Examples:
            >>> Symbols().strip_unit("1°.25", "°")
            ('1.25', True)
            >>> Symbols().strip_unit("1°25′44.5″", "″")
            ('1°25′44.5″', False)
        """
        if not self.dec_sep or not unit:
            return d, False
        if d.count(unit) != 1:
            return d, False
        if any(g and g != unit and g in d for g in self.dms_units + self.hms_units):
            return d, False

        xu = d.find(unit)
        if self.dec_sep in d[:xu]:
            return d, False
        rest = d[xu + len(unit):]
        if self.dec_combine and rest.startswith(self.dec_combine):
            return d[:xu] + self.dec_sep + rest[len(self.dec_combine):], True
        if rest.startswith(self.dec_sep) or not rest:
            return d[:xu] + rest, True
        return d, False


# Module-level defaults ------------------------------------------------------------------------------------------------

DEFAULT_SYMBOLS: Final[Symbols] = Symbols()


def get_symbols(sym: Symbols | None = None) -> Symbols:
    """Return sym, or the module default when sym is None."""
    if sym is None:
        return DEFAULT_SYMBOLS
    if not isinstance(sym, Symbols):
        raise TypeError(f"sym must be Symbols or None, but got {type(sym).__name__}")
    return sym


def combine_unit(d: str, unit: str) -> str:
    """Symbols.combine_unit() with the default symbols."""
    return DEFAULT_SYMBOLS.combine_unit(d, unit)


def insert_unit(d: str, unit: str) -> str:
    """Symbols.insert_unit() with the default symbols."""
    return DEFAULT_SYMBOLS.insert_unit(d, unit)


def strip_unit(d: str, unit: str) -> tuple[str, bool]:
    """Symbols.strip_unit() with the default symbols."""
    return DEFAULT_SYMBOLS.strip_unit(d, unit)
