"""
Combination of several uncertainties of the same measurement.

Asymmetric errors enter as consecutive upper/lower pairs of signed numbers.
Both functions rely on that layout and warn when it is violated.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import warnings
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import AggregationWarning
from .number import DecimalNumber


# Methods --------------------------------------------------------------------------------------------------------------

def quadrature_sum(errors: Sequence[DecimalNumber]) -> DecimalNumber:
    """
    Total error as the quadrature sum of uncorrelated errors, sqrt(sum(e**2)).

    An asymmetric pair contributes the square of the average of its two
    magnitudes. The sum is compensated (Kahan) to limit rounding drift.

    Args:
        errors: Symmetric errors and upper/lower pairs of signed errors.

    Returns:
        The total error as a symmetric DecimalNumber. A single error is returned
        unchanged, an empty sequence gives zero.

    Warns:
        AggregationWarning: If the signed errors can not be split into pairs; the
                            total is returned but is not reliable.

    Examples:
        >>> quadrature_sum([DecimalNumber.from_text("3"), DecimalNumber.from_text("4")]).to_text()
        '5'
    """
    if len(errors) == 1:
        return errors[0]

    total = 0.0
    compensation = 0.0
    asymmetric = 0
    half_upper = 0.0
    for e in errors:
        v = abs(e.to_number())
        if e.sign == 0:
            term = v * v
        else:
            asymmetric += 1
            v *= 0.5
            term = v * v
            if asymmetric % 2 == 0:
                # cross term of ((upper + lower) / 2)**2
                term += 2.0 * half_upper * v
            else:
                half_upper = v
        y = term - compensation
        t = total + y
        compensation = (t - total) - y
        total = t

    if asymmetric % 2 != 0:
        warnings.warn("asymmetric errors do not seem to come in pairs, the total error computation is wrong",
                      AggregationWarning, stacklevel=2)
    return DecimalNumber.from_numeric(math.sqrt(total))


def symmetrize(errors: Sequence[DecimalNumber], threshold: float = 0.10) -> list[DecimalNumber]:
    """
    Replace asymmetric pairs of nearly equal magnitude with one symmetric error.

    Scans the errors from the end. Each signed error is paired with the error just
    before it; if their magnitudes a (earlier) and b (later) satisfy
    |a - b| / b < threshold, the pair is replaced by their exact average with sign 0.

    Args:
        errors: Errors in input order; not modified.
        threshold: Relative difference below which a pair is merged (strict).

    Returns:
        A new list of errors, shorter by one for every merged pair.

    Warns:
        AggregationWarning: If a signed error is preceded by a symmetric one.

    Examples:
        >>> errs = [DecimalNumber.from_text("+0.21"), DecimalNumber.from_text("-0.20")]
        >>> [e.to_text() for e in symmetrize(errs)]
        ['0.205']
    """
    limit = Decimal(str(threshold))
    out = list(errors)
    i = len(out) - 1
    while i > 0:
        later = out[i]
        if later.sign == 0:
            i -= 1
            continue
        i -= 1
        earlier = out[i]
        if earlier.sign == 0:
            warnings.warn("asymmetric errors do not seem to come in pairs",
                          AggregationWarning, stacklevel=2)

        a, b = earlier.magnitude(), later.magnitude()
        if b == 0:
            merge = a == 0
        else:
            merge = abs(a - b) / b < limit
        if merge:
            total = a + b
            with localcontext() as ctx:
                # at most 19 digits always fit a 64-bit mantissa
                ctx.prec = 19
                ctx.rounding = ROUND_HALF_UP
                average = total / 2
            out[i] = DecimalNumber.from_numeric(average)
            del out[i + 1]
        i -= 1
    return out
