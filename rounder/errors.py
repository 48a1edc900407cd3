"""
Exceptions and warnings raised while parsing, rounding and formatting measurements.

Errors abort a single formatting call and never leave a partial result behind.
Warnings flag numerically questionable input but let the call complete; they are
issued through the standard warnings module, so callers can filter, record or
escalate them:

    import warnings
    warnings.simplefilter("error", PaddingWarning)
"""

# Classes --------------------------------------------------------------------------------------------------------------

class RounderError(ValueError):
    """Base class for errors raised by the rounder package."""


class ParseError(RounderError):
    """
    Raised when text or a numeric value can not be converted into a DecimalNumber.

    Covers empty input, input without digits, multiple decimal points, invalid
    characters, non-finite numbers and mantissa overflow beyond 64 bits.
    """


class PrecisionError(RounderError):
    """Raised when rounding to a precision finer than the one already discarded."""


class RounderWarning(UserWarning):
    """Base class for non-fatal rounder diagnostics."""


class AggregationWarning(RounderWarning):
    """Asymmetric errors do not come in upper/lower pairs; combined errors are unreliable."""


class PaddingWarning(RounderWarning):
    """Fewer than three significant digits available, the mantissa was padded with zeros."""


class PrecisionWarning(RounderWarning):
    """A value is less precise than the matched precision and was kept as given."""
