"""
Significant-digit rounding of uncertainties and precision matching of measurements.

Rounding policies work on a mantissa normalized to three significant digits:

    PDG        100-354 -> 2 digits, 355-949 -> 1 digit, 950-999 -> "10" one order up
    TWO_DIGIT  always 2 digits

All rounding is round-half-up on exact decimal digits. Functions never modify
their arguments; they return new DecimalNumber instances.

The normalization to three digits is itself a rounding step, so a value can be
rounded twice: 0.1249 is first normalized to 0.125 and then rounded to 0.13.

    >>> pdg_round(DecimalNumber.from_text("0.1249")).to_text()
    '0.13'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from dataclasses import replace
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .aggregate import quadrature_sum, symmetrize
from .errors import PaddingWarning, PrecisionError, PrecisionWarning
from .number import DecimalNumber
from .options import FormatOptions, RoundAlgorithm
from .utils import fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def keep_three_significant(number: DecimalNumber, quiet: bool = False) -> DecimalNumber:
    """
    Normalize the mantissa to exactly three significant digits.

    Short mantissas are padded with zeros, "0.3" becomes 300×10^-3. Long ones are
    rounded half-up on the first dropped digit, "0.12349" becomes 123×10^-3. Zero
    has no significant digits and is returned unchanged.

    Warns:
        PaddingWarning: If zeros were appended and quiet is False.
    """
    if number.mantissa == 0:
        return number

    nd = number.digits
    if nd < 3:
        if not quiet:
            warnings.warn(f"not enough significant digits in {fmt_value(number.to_text())}, padding with zeros",
                          PaddingWarning, stacklevel=2)
        pad = 3 - nd
        return replace(number, mantissa=number.mantissa * 10 ** pad, exponent=number.exponent - pad)
    if nd > 3:
        number = _drop_digits(number, nd - 3)
        if number.mantissa == 1000:
            number = replace(number, mantissa=100, exponent=number.exponent + 1)
    return number


def pdg_rule(number: DecimalNumber) -> DecimalNumber:
    """
    Apply the PDG rule to a three-digit mantissa.

    Raises:
        ValueError: If the mantissa does not have exactly three digits.

    Examples:
        >>> pdg_rule(DecimalNumber(354, -3)).to_text()
        '0.35'
        >>> pdg_rule(DecimalNumber(355, -3)).to_text()
        '0.4'
        >>> pdg_rule(DecimalNumber(950, -3)).to_text()
        '1.0'
    """
    m = number.mantissa
    if not 100 <= m <= 999:
        raise ValueError(f"PDG rule expects a 3-digit mantissa, but got {fmt_value(m)}")

    if m <= 354:
        return _drop_digits(number, 1)
    if m <= 949:
        return _drop_digits(number, 2)
    # keep two significant digits of the next power of ten
    return replace(number, mantissa=10, exponent=number.exponent + 2)


def pdg_round(number: DecimalNumber, quiet: bool = False) -> DecimalNumber:
    """Round to 1 or 2 significant digits following the PDG convention."""
    return pdg_rule(keep_three_significant(number, quiet))


def two_digit_round(number: DecimalNumber, quiet: bool = False) -> DecimalNumber:
    """
    Round to two significant digits.

    Examples:
        >>> two_digit_round(DecimalNumber.from_text("0.123")).to_text()
        '0.12'
        >>> two_digit_round(DecimalNumber.from_text("0.0996")).to_text()
        '0.10'
    """
    number = keep_three_significant(number, quiet)
    if number.mantissa == 0:
        return number
    number = _drop_digits(number, 1)
    if number.mantissa == 100:
        number = replace(number, mantissa=10, exponent=number.exponent + 1)
    return number


def round_significant(number: DecimalNumber,
                      algorithm: RoundAlgorithm | str = RoundAlgorithm.PDG,
                      quiet: bool = False) -> DecimalNumber:
    """Round to the significant digits of the given policy."""
    algorithm = RoundAlgorithm(algorithm)
    if number.mantissa == 0:
        return number
    if algorithm == RoundAlgorithm.PDG:
        return pdg_round(number, quiet)
    return two_digit_round(number, quiet)


def round_to_precision(number: DecimalNumber, precision: int) -> DecimalNumber:
    """
    Round to the given decimal exponent, half-up on the last dropped digit.

    Args:
        number: The value to round.
        precision: Target exponent, 10**precision is the last kept decimal place.

    Raises:
        PrecisionError: If precision is finer than the exponent of number; digits
                        already discarded can not be recovered.

    Examples:
        >>> round_to_precision(DecimalNumber.from_text("1.2345"), -2).to_text()
        '1.23'
        >>> round_to_precision(DecimalNumber.from_text("1.2350"), -2).to_text()
        '1.24'
    """
    if precision < number.exponent:
        raise PrecisionError(f"cannot round {number.to_text()} to precision {precision}")
    return _drop_digits(number, precision - number.exponent)


def round_measurement(central: DecimalNumber,
                      errors: Sequence[DecimalNumber],
                      options: FormatOptions | None = None,
                      ) -> tuple[DecimalNumber, list[DecimalNumber]]:
    """
    Round a central value and its errors for publication.

    Steps:
        1. Symmetrize nearly symmetric pairs if options.symmetrize_errors.
        2. With round_to_total_error, the target precision is that of the rounded
           quadrature sum of the errors.
        3. Otherwise, with round_to_larger_error, every error is rounded on its own
           and the target precision is that of the least precise one.
           Zero errors carry no precision and do not count.
        4. With a target, the central value and the errors are rounded to it.
           Values already coarser than the target are kept as they are, zeros
           are written with the target precision.
        5. Without a target (no errors, or all of them zero), every value is
           rounded on its own.

    Args:
        central: Central value.
        errors: Symmetric errors and upper/lower pairs of signed errors.
        options: Rounding configuration, defaults to FormatOptions().

    Returns:
        Tuple (central, errors) of rounded values replacing the inputs.

    Warns:
        PrecisionWarning: If a value has fewer decimals than the target precision.
        AggregationWarning: If signed errors do not come in pairs.
        PaddingWarning: If a value had to be padded and options.quiet is False.

    Examples:
        >>> c, e = round_measurement(DecimalNumber.from_text("1.234"), [DecimalNumber.from_text("0.0456")])
        >>> c.to_text(), e[0].to_text()
        ('1.23', '0.05')
    """
    options = options if options is not None else FormatOptions()
    quiet = options.quiet
    errors = list(errors)

    if options.symmetrize_errors:
        errors = symmetrize(errors, options.symmetrize_threshold)

    precision = None
    if errors and options.round_to_total_error:
        total = round_significant(quadrature_sum(errors), options.algorithm, quiet)
        if total.mantissa != 0:
            precision = total.exponent
    elif errors and options.round_to_larger_error:
        errors = [round_significant(e, options.algorithm, quiet) for e in errors]
        # zero errors carry no precision
        exponents = [e.exponent for e in errors if e.mantissa != 0]
        if exponents:
            precision = max(exponents)

    if precision is None:
        central = round_significant(central, options.algorithm, quiet)
        errors = [round_significant(e, options.algorithm, quiet) for e in errors]
        return central, errors

    central = _match_precision(central, precision)
    errors = [_match_precision(e, precision) for e in errors]
    return central, errors


# Private Methods ------------------------------------------------------------------------------------------------------

def _drop_digits(number: DecimalNumber, count: int) -> DecimalNumber:
    """Strip count trailing digits, rounding half-up on the last digit dropped."""
    if count <= 0:
        return number
    mantissa = number.mantissa // 10 ** (count - 1)
    last = mantissa % 10
    mantissa //= 10
    if last >= 5:
        mantissa += 1
    return replace(number, mantissa=mantissa, exponent=number.exponent + count)


def _match_precision(number: DecimalNumber, precision: int) -> DecimalNumber:
    """Round to precision, keep values which are already coarser; zero takes the precision as is."""
    if number.mantissa == 0:
        return replace(number, exponent=precision)
    if number.exponent > precision:
        warnings.warn(f"{number.to_text()} has less precision than 10^{precision}, kept as given",
                      PrecisionWarning, stacklevel=3)
        return number
    return round_to_precision(number, precision)
