"""
Formattable wrappers for angles, hour angles, right ascensions and times.

Each wrapper associates a value with the symbols used to display it and an error
slot. Python's format protocol gives a custom __format__ no way to report an
overflow other than raising, which would abort the whole f-string, so the
wrapper emits asterisks and leaves the detailed error in `err` for inspection
after the call.

Typically you will use these types only in code that is generating output,
keeping plain floats for computation.

Examples:
    >>> from sexa.units import angle_from_sexa, time_from_sexa
    >>> a = FmtAngle(angle_from_sexa(' ', 135, 0, 0))
    >>> f"{a:2s}"
    '**********'
    >>> a.err
    WidthOverflowError('Degrees overflow width')

    >>> f"{FmtTime(time_from_sexa(' ', 15, 22, 7)):0s}"
    '15ʰ22ᵐ07ˢ'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import ClassVar

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import SexaOverflowError
from .numeric import std_float
from .render import render
from .specifier import parse_spec
from .symbols import Symbols, get_symbols
from .units import deg, hours, time_hours, wrap_ra


# Classes --------------------------------------------------------------------------------------------------------------

class _FmtValue:
    """
    Common formatting behavior of the wrappers.

    Subclasses are dataclasses with the value field first, then:
        sym: Symbols override, None for DEFAULT_SYMBOLS.
        err: Overflow error of the most recent __format__ call, None if it succeeded.
    """
    sym: Symbols | None
    err: SexaOverflowError | None

    HOURS: ClassVar[bool] = False
    RA: ClassVar[bool] = False

    def __format__(self, spec: str) -> str:
        """
        Format with a sexagesimal specifier, see sexa.specifier.

        Raises:
            SpecifierError: Unknown verb or malformed specifier. err is left unchanged.
        """
        directive = parse_spec(spec, ra=self.RA)
        text, self.err = render(self.display_value, directive, hours=self.HOURS, symbols=self.sym)
        return text

    def __str__(self) -> str:
        return format(self, "s")

    def _validate_sym(self):
        get_symbols(self.sym)

    @property
    def display_value(self) -> float:
        """Value in degrees or hours."""
        raise NotImplementedError


@dataclass
class FmtAngle(_FmtValue):
    """
    Angle in radians, displayed in degrees, minutes and seconds of arc.

    Examples:
        >>> str(FmtAngle(angle_from_sexa('-', 13, 47, 22)))
        '-13°47′22″'
        >>> format(FmtAngle(angle_from_deg(.089876)), ".6h")
        '0.089876°'
    """
    angle: float
    sym: Symbols | None = None
    err: SexaOverflowError | None = field(default=None, compare=False)

    def __post_init__(self):
        self.angle = std_float(self.angle, unit="rad")
        self._validate_sym()

    @property
    def display_value(self) -> float:
        return deg(self.angle)


@dataclass
class FmtHourAngle(_FmtValue):
    """
    Hour angle in radians, displayed in hours, minutes and seconds.

    Examples:
        >>> str(FmtHourAngle(hour_angle_from_sexa('-', 12, 34, 45.6)))
        '-12ʰ34ᵐ46ˢ'
    """
    hour_angle: float
    sym: Symbols | None = None
    err: SexaOverflowError | None = field(default=None, compare=False)

    HOURS: ClassVar[bool] = True

    def __post_init__(self):
        self.hour_angle = std_float(self.hour_angle, unit="rad")
        self._validate_sym()

    @property
    def display_value(self) -> float:
        return hours(self.hour_angle)


@dataclass
class FmtRA(_FmtValue):
    """
    Right ascension in radians, displayed in hours, minutes and seconds.

    RA is never negative: the value is wrapped to [0, 2π) for display and
    the '+' and ' ' flags are ignored.

    Examples:
        >>> str(FmtRA(ra_from_sexa(12, 34, 45.6)))
        '12ʰ34ᵐ46ˢ'
    """
    ra: float
    sym: Symbols | None = None
    err: SexaOverflowError | None = field(default=None, compare=False)

    HOURS: ClassVar[bool] = True
    RA: ClassVar[bool] = True

    def __post_init__(self):
        self.ra = std_float(self.ra, unit="rad")
        self._validate_sym()

    @property
    def display_value(self) -> float:
        return hours(wrap_ra(self.ra))


@dataclass
class FmtTime(_FmtValue):
    """
    Time in seconds, displayed in hours, minutes and seconds.

    Examples:
        >>> str(FmtTime(time_from_sexa('-', 12, 34, 45.6)))
        '-12ʰ34ᵐ46ˢ'
    """
    time: float
    sym: Symbols | None = None
    err: SexaOverflowError | None = field(default=None, compare=False)

    HOURS: ClassVar[bool] = True

    def __post_init__(self):
        self.time = std_float(self.time, unit="s")
        self._validate_sym()

    @property
    def display_value(self) -> float:
        return time_hours(self.time)
