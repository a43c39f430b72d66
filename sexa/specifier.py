#
# Sexa Format Specifiers
#

# The syntax of a format specifier is
#
#    [%][flags][width][.precision][verb]
#
# Verbs select the number of segments and the decimal unit convention:
#
#    decimal-unit indication:             following  combined  inserted
#
#    three segments, decimal in seconds:      s         c         d
#    two segments, decimal in minutes:        m         n         o
#    one segment, decimal in hr/degs:         h         i         j
#
# v is equivalent to s, and so is an empty verb.
#
# Flags:
#    +   always print leading sign
#   ' '  (space) leave space for elided + sign
#    #   display all segments, even if 0
#    0   pad displayed segments with leading zeros
#
# Width is the number of digits in the integer part of the first segment, not the total width.

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Final

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import SpecifierError


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class DecimalUnit(StrEnum):
    """
    Placement of the final unit glyph relative to the decimal separator.

    Attributes:
        FOLLOWING (str) : Unit follows the segment - 1°23′45.6″
        COMBINED (str)  : Unit over a combining decimal mark - 1°23′45″̣6
        INSERTED (str)  : Unit inserted before the decimal separator - 1°23′45″.6
    """
    FOLLOWING = "following"
    COMBINED = "combined"
    INSERTED = "inserted"


@unique
class SignPolicy(StrEnum):
    """
    Leading sign policy for non-negative values.

    Attributes:
        ALWAYS (str)   : '+' for non-negative values
        SPACE (str)    : ' ' for non-negative values
        NEGATIVE (str) : nothing for non-negative values
    """
    ALWAYS = "always"
    SPACE = "space"
    NEGATIVE = "negative"
# @formatter:on


VERBS: Final[frozendict] = frozendict({
    "s": (3, DecimalUnit.FOLLOWING),
    "v": (3, DecimalUnit.FOLLOWING),
    "c": (3, DecimalUnit.COMBINED),
    "d": (3, DecimalUnit.INSERTED),
    "m": (2, DecimalUnit.FOLLOWING),
    "n": (2, DecimalUnit.COMBINED),
    "o": (2, DecimalUnit.INSERTED),
    "h": (1, DecimalUnit.FOLLOWING),
    "i": (1, DecimalUnit.COMBINED),
    "j": (1, DecimalUnit.INSERTED),
})

_SPEC_RE = re.compile(
    r"%?(?P<flags>[+ #0]*)(?P<width>[1-9][0-9]*)?(?:\.(?P<precision>[0-9]*))?(?P<verb>.?)",
    re.DOTALL,
)


@dataclass(frozen=True)
class Directive:
    """
    Parsed format specifier.

    Attributes:
        verb: Verb character the directive was parsed from.
        segments: Number of segments, 1 to 3.
        convention: Placement of the final unit glyph.
        sign: Sign policy for non-negative values.
        zero_pad: Pad segments with leading zeros.
        show_all: Print leading segments even if 0.
        width: Digits in the integer part of the first segment, 0 if unset.
        precision: Digits after the decimal separator of the final segment.
    """
    verb: str = "s"
    segments: int = 3
    convention: DecimalUnit = DecimalUnit.FOLLOWING
    sign: SignPolicy = SignPolicy.NEGATIVE
    zero_pad: bool = False
    show_all: bool = False
    width: int = 0
    precision: int = 0

    def __post_init__(self):
        if self.segments not in (1, 2, 3):
            raise ValueError(f"segments must be 1, 2 or 3, got {self.segments}")
        if self.width < 0:
            raise ValueError(f"width must be >= 0, got {self.width}")
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
        if self.width > 0 and not self.show_all:
            object.__setattr__(self, "show_all", True)

    @property
    def fixed_width(self) -> bool:
        return self.width > 0


# Methods --------------------------------------------------------------------------------------------------------------

def parse_spec(spec: str, *, ra: bool = False) -> Directive:
    """
    Parse a format specifier into a Directive.

    Args:
        spec: Specifier text as passed to __format__, optionally prefixed with '%'.
        ra: Parse for a right ascension; '+' and ' ' flags are ignored.

    Returns:
        Directive with segment count and decimal unit convention looked up from VERBS.

    Raises:
        SpecifierError: Unknown verb or malformed flags, width or precision.

    Examples:
        >>> parse_spec("+03.2m")
        Directive(verb='m', segments=2, convention=<DecimalUnit.FOLLOWING: 'following'>, ...)
        >>> parse_spec("z")
        Traceback (most recent call last):
            ...
        sexa.errors.SpecifierError: %!z(BADVERB)
    """
    if not isinstance(spec, str):
        raise TypeError(f"format spec must be str, but got {type(spec).__name__}")

    match = _SPEC_RE.fullmatch(spec)
    if match is None:
        raise SpecifierError(f"%!(BADSPEC={spec})", spec=spec)

    verb = match["verb"] or "v"
    if verb not in VERBS:
        raise SpecifierError(f"%!{verb}(BADVERB)", spec=spec, verb=verb)
    segments, convention = VERBS[verb]

    flags = match["flags"]
    width = int(match["width"]) if match["width"] else 0
    precision = int(match["precision"]) if match["precision"] else 0

    if ra:
        sign = SignPolicy.NEGATIVE
    elif "+" in flags:
        sign = SignPolicy.ALWAYS
    elif " " in flags or width > 0:
        sign = SignPolicy.SPACE
    else:
        sign = SignPolicy.NEGATIVE

    return Directive(
        verb=verb,
        segments=segments,
        convention=convention,
        sign=sign,
        zero_pad="0" in flags,
        show_all="#" in flags or width > 0,
        width=width,
        precision=precision,
    )
