"""
Decomposition of a float into sexagesimal segments.

The value is scaled to units of the last segment and to the requested number of
decimal places, rounded once to an integer, then split leftward by 60. Rounding
a fraction such as 59.9999″ up to 60″ therefore carries into minutes, and on into
degrees or hours, without a separate carry pass.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import NonFiniteError, PrecisionOverflowError

# float64 resolves every integer up to 2**53
MAX_EXACT_INT = 2 ** 53
MAX_PRECISION = len(str(MAX_EXACT_INT))

SEGMENT_SCALE = {1: 1, 2: 60, 3: 3600}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Segments:
    """
    Sign, integer segments and final-segment fraction of a decomposed value.

    Attributes:
        negative: True if the source value was negative and did not round to zero.
        values: 1 to 3 non-negative ints, most significant first. All but the first are < 60.
        fraction: Fractional digits of the final segment as an int, scaled by 10**precision.
        precision: Number of fractional digits held in fraction.

    Examples:
        Segments(negative=False, values=(23, 26, 44), fraction=5, precision=1)
        is 23°26′44.5″ or 23ʰ26ᵐ44.5ˢ
    """
    negative: bool
    values: tuple[int, ...]
    fraction: int = 0
    precision: int = 0

    @property
    def first(self) -> int:
        return self.values[0]

    @property
    def fraction_str(self) -> str:
        """Fraction digits zero-padded to precision, '' if precision is 0."""
        if self.precision == 0:
            return ""
        return f"{self.fraction:0{self.precision}d}"


# Methods --------------------------------------------------------------------------------------------------------------

def decompose(x: float, segments: int, precision: int = 0) -> Segments:
    """
    Split x into sexagesimal segments rounded to precision places on the last segment.

    Args:
        x: Value in degrees or hours.
        segments: 3 for d/m/s, 2 for d/m with decimal minutes, 1 for decimal degrees.
        precision: Decimal places on the final segment.

    Returns:
        Segments with carries fully propagated.

    Raises:
        NonFiniteError: x is NaN or infinite.
        PrecisionOverflowError: More digits requested than float64 holds at the magnitude of x.
            At one degree, 12 digits are available on seconds; at 360 degrees, 9.
            More than MAX_PRECISION digits are refused for any x, zero included.

    Examples:
        >>> decompose(1 + 59/60 + 59.9999/3600, 3, 2)
        Segments(negative=False, values=(2, 0, 0), fraction=0, precision=2)
        >>> decompose(-0.5, 2)
        Segments(negative=True, values=(0, 30), fraction=0, precision=0)
    """
    if segments not in SEGMENT_SCALE:
        raise ValueError(f"segments must be 1, 2 or 3, got {segments}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    if math.isnan(x):
        raise NonFiniteError("NaN is not a formattable value")
    if math.isinf(x):
        raise NonFiniteError(f"{'-' if x < 0 else '+'}Inf is not a formattable value")
    if precision > MAX_PRECISION:
        raise PrecisionOverflowError(f"Precision {precision} exceeds the {MAX_PRECISION} digits of float64")

    # Exact from here on: a float converts to Fraction without loss
    scaled = Fraction(abs(x)) * SEGMENT_SCALE[segments] * 10 ** precision
    if scaled > MAX_EXACT_INT:
        raise PrecisionOverflowError(
            f"Precision {precision} exceeds representable digits of {abs(x)!r}"
        )

    # Round half up, once
    total = math.floor(scaled + Fraction(1, 2))

    whole, fraction = divmod(total, 10 ** precision)
    values = []
    for _ in range(segments - 1):
        whole, rem = divmod(whole, 60)
        values.append(rem)
    values.append(whole)
    values.reverse()

    return Segments(
        negative=x < 0 and total != 0,
        values=tuple(values),
        fraction=fraction,
        precision=precision,
    )
