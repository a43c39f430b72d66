#
# Sexa Errors
#

# Two disjoint families:
#   SpecifierError     - the format specifier itself is wrong; raised to the caller.
#   SexaOverflowError  - the value can not be expressed in a valid format; the renderer
#                        emits an all-asterisk marker and hands the error back as data.


# Classes --------------------------------------------------------------------------------------------------------------

class SpecifierError(ValueError):
    """
    Malformed format specifier or unknown verb.

    The message is the inline diagnostic token, e.g. "%!z(BADVERB)".
    """

    def __init__(self, message: str, *, spec: str, verb: str = ""):
        super().__init__(message)
        self.spec = spec
        self.verb = verb


class SexaOverflowError(OverflowError):
    """Value can not be expressed in the requested format."""


class WidthOverflowError(SexaOverflowError):
    """Integer part of the first segment has more digits than the specified width."""


class PrecisionOverflowError(SexaOverflowError):
    """More fractional digits requested than float64 represents at the value's magnitude."""


class NonFiniteError(SexaOverflowError):
    """NaN, +Inf or -Inf."""
