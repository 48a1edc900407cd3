"""
Publication-style formatting of a central value with its uncertainties.

Entry points:
    format_numbers: round and render DecimalNumbers.
    format_measurement: same, from text or numbers.
    Measurement: value object usable in f-strings, f"{m:pX}".

Examples:
    >>> format_measurement("1.5", "0.23")
    '1.5 ± 0.23'
    >>> format_measurement("2.5", ["+0.3", "-0.2"])
    '2.5 +0.30 -0.20'
    >>> m = Measurement.of("0.0123456", "0.00012", labels=["stat"])
    >>> f"{m:pX}"
    '0.01235 \\\\pm 0.00012 \\\\text{stat}'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Self, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .number import DecimalNumber
from .options import FormatOptions
from .render import render
from .rounding import round_measurement
from .utils import fmt_type

Numeric = DecimalNumber | str | int | float | Decimal


# Methods --------------------------------------------------------------------------------------------------------------

def format_numbers(central: DecimalNumber,
                   errors: Sequence[DecimalNumber],
                   options: FormatOptions | None = None) -> str:
    """
    Round a central value and its errors and render them as text.

    Args:
        central: Central value.
        errors: Symmetric errors and upper/lower pairs of signed errors.
        options: Formatting configuration, defaults to FormatOptions().

    Returns:
        The complete formatted text; nothing is returned on error.

    Raises:
        PrecisionError: If rounding would require discarded digits.
        TypeError: If central or an error is not a DecimalNumber.
    """
    options = options if options is not None else FormatOptions()
    if not isinstance(central, DecimalNumber):
        raise TypeError(f"central must be DecimalNumber, but got {fmt_type(central)}")
    for e in errors:
        if not isinstance(e, DecimalNumber):
            raise TypeError(f"errors must contain DecimalNumber only, but got {fmt_type(e)}")

    central, errors = round_measurement(central, errors, options)
    return render(central, errors, options)


def format_measurement(value: Numeric,
                       errors: Numeric | Iterable[Numeric],
                       options: FormatOptions | None = None) -> str:
    """
    Format a value with one error or an iterable of errors.

    Value and errors may be DecimalNumbers, decimal strings or numbers. Strings
    are the way to keep trailing zeros: "0.30" is not the same as 0.3.

    Raises:
        ParseError: If a value can not be parsed.
        PrecisionError: If rounding would require discarded digits.
    """
    central = DecimalNumber.from_any(value)
    return format_numbers(central, _to_numbers(errors), options)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Measurement:
    """
    A central value with its errors and their labels.

    Formatting follows the flag-letter language of FormatOptions.from_format_spec():
    an empty spec rounds to two significant digits of the total error, str()
    uses the default FormatOptions instead.

    Attributes:
        central: Central value.
        errors: Symmetric errors and upper/lower pairs of signed errors.
        labels: One label per symmetric error or per upper/lower pair.

    Examples:
        >>> m = Measurement.of("10.1234", "+0.52", "-0.37")
        >>> f"{m}"
        '10.12 +0.52 -0.37'
        >>> f"{m:pT}"
        '10.1 #h(0.0em)^(+0.5) _(-0.4)'
    """
    central: DecimalNumber
    errors: tuple[DecimalNumber, ...] = field(default=())
    labels: tuple[str, ...] = field(default=())

    def __post_init__(self):
        """Validate and copy fields"""
        if not isinstance(self.central, DecimalNumber):
            raise TypeError(f"central must be DecimalNumber, but got {fmt_type(self.central)}")
        object.__setattr__(self, "errors", tuple(self.errors))
        for e in self.errors:
            if not isinstance(e, DecimalNumber):
                raise TypeError(f"errors must contain DecimalNumber only, but got {fmt_type(e)}")
        object.__setattr__(self, "labels", tuple(self.labels))

    @classmethod
    def of(cls, value: Numeric, *errors: Numeric, labels: Iterable[str] = ()) -> Self:
        """Build a Measurement from text or numbers."""
        return cls(central=DecimalNumber.from_any(value),
                   errors=tuple(DecimalNumber.from_any(e) for e in errors),
                   labels=tuple(labels))

    def __format__(self, format_spec: str) -> str:
        options = FormatOptions.from_format_spec(format_spec).merge(labels=self.labels)
        return format_numbers(self.central, self.errors, options)

    def __str__(self) -> str:
        return format_numbers(self.central, self.errors, FormatOptions(labels=self.labels))

    def format(self, options: FormatOptions | None = None) -> str:
        """Format with explicit options; labels of the measurement are used unless options carry their own."""
        options = options if options is not None else FormatOptions()
        if not options.labels:
            options = options.merge(labels=self.labels)
        return format_numbers(self.central, self.errors, options)


# Private Methods ------------------------------------------------------------------------------------------------------

def _to_numbers(errors: Numeric | Iterable[Numeric]) -> list[DecimalNumber]:
    """Single error or iterable of errors as a list of DecimalNumbers."""
    if isinstance(errors, (DecimalNumber, str, int, float, Decimal)):
        return [DecimalNumber.from_any(errors)]
    if isinstance(errors, abc.Iterable):
        return [DecimalNumber.from_any(e) for e in errors]
    raise TypeError(f"errors must be a number, a string or an iterable of them, but got {fmt_type(errors)}")
