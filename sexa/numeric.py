"""
Normalize numeric types from Python stdlib and third-party libraries to float.

Sexagesimal values are plain float64s in native units. Values arriving from
Decimal, Fraction, NumPy scalars or Astropy quantities are converted here, once,
at the boundary.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_float(value, *, unit: str | None = None) -> float:
    """
    Convert a numeric value to a standard Python float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal, Fraction,
        and third-party types via __index__, .item(), .to_value()/.value or __float__.

    unit : str, optional
        Native unit for quantity-like values (e.g. "rad", "s"). If given, an
        Astropy Quantity is converted to this unit before its magnitude is taken;
        an angle in degrees passed with unit="rad" arrives as radians.

    Returns
    -------
    float
        Including special IEEE 754 values inf, -inf and nan, which are preserved
        and left to the renderer to report as overflow.

    Raises
    ------
    TypeError
        For bool, None, str and other unsupported types, or when a quantity
        can not be converted to unit.

    Detection Priority
    ------------------
    1. int/float fast path
    2. .to_value(unit) / .value (Astropy Quantity)
    3. __index__() (NumPy integers)
    4. .item() (array scalars)
    5. __float__() (Decimal, Fraction, NumPy floats, general fallback)

    Examples
    --------
    >>> std_float(42)
    42.0
    >>> from decimal import Decimal
    >>> std_float(Decimal("0.5"))
    0.5
    >>> std_float(True)
    Traceback (most recent call last):
        ...
    TypeError: boolean values not supported, got True
    """
    # Booleans are ints, reject explicitly
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # Python int beyond float range
            return math.inf if value > 0 else -math.inf

    if value is None or isinstance(value, (str, bytes)):
        raise TypeError(f"unsupported numeric type: {type(value).__name__}")

    # Quantity-like objects with units, before __index__ and .item() which would drop the unit
    if hasattr(value, "value") and hasattr(value, "unit"):
        if unit is not None and hasattr(value, "to_value"):
            try:
                return std_float(value.to_value(unit))
            except (TypeError, ValueError, AttributeError) as e:
                raise TypeError(f"cannot convert {type(value).__name__} in {value.unit} to {unit}: {e}") from e
        return std_float(value.value)

    # NumPy integer types; float arrays define __index__ but refuse it, try .item() next
    if hasattr(value, "__index__"):
        try:
            return float(operator.index(value))
        except TypeError:
            pass

    # Array/tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return float(result)

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {type(value).__name__} to float: {e}") from e
        except OverflowError:
            # Decimal/Fraction beyond float range
            return math.inf if value > 0 else -math.inf

    raise TypeError(
        f"unsupported numeric type: {type(value).__name__}. "
        f"Expected int, float, or types implementing __index__, __float__, .item(), "
        f"or having .value attribute (e.g., numpy scalars, Decimal, Fraction, Quantity)"
    )
