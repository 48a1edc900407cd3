"""
Exact decimal representation of measured values and their uncertainties.

A DecimalNumber keeps the digits exactly as they were written: "0.230" has a
mantissa of 230 and an exponent of -3, so trailing zeros survive a parse/print
round trip. Floats are only used for the arithmetic of combined errors, never
for the final text.
"""

# ## Sign convention
#
# sign == 0 marks a symmetric error (or a plain central value) and renders with
# "±" in front of it; sign == +1/-1 marks the upper/lower half of an asymmetric
# error and renders with an explicit "+"/"-".

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ParseError
from .utils import fmt_type, fmt_value

MANTISSA_MAX = 2 ** 64 - 1


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class DecimalNumber:
    """
    An exact decimal value: (sign or +1) * mantissa * 10**exponent.

    Instances are immutable. Rounding functions return new instances which
    replace the originals.

    Attributes:
        mantissa: Non-negative integer fitting in 64 bits.
        exponent: Power of ten applied to the mantissa, unbounded.
        sign: -1 or +1 for the lower/upper side of an asymmetric error,
              0 for symmetric errors and unsigned values.

    Examples:
        >>> DecimalNumber.from_text("0.230")
        DecimalNumber(mantissa=230, exponent=-3, sign=0)
        >>> DecimalNumber.from_text("-1.5").to_text()
        '-1.5'
        >>> str(DecimalNumber(12, 2))
        '1200'
    """
    mantissa: int = 0
    exponent: int = 0
    sign: Literal[-1, 0, 1] = 0

    def __post_init__(self):
        """Validate fields"""
        for name in ("mantissa", "exponent", "sign"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, but got {fmt_type(value)}")

        if not 0 <= self.mantissa <= MANTISSA_MAX:
            raise ValueError(f"mantissa must be in [0, 2**64 - 1], but got {fmt_value(self.mantissa)}")

        if self.sign not in (-1, 0, 1):
            raise ValueError(f"sign must be one of -1, 0, +1, but got {fmt_value(self.sign)}")

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_any(cls, value: "DecimalNumber | str | int | float | Decimal", sign: int = 0) -> Self:
        """
        Build a DecimalNumber from text, a number or another DecimalNumber.

        DecimalNumber instances are returned unchanged; sign is only applied
        to numeric input.
        """
        if isinstance(value, DecimalNumber):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        return cls.from_numeric(value, sign)

    @classmethod
    def from_numeric(cls, value: int | float | Decimal, sign: int = 0) -> Self:
        """
        Convert a number through its shortest exact round-trip decimal text.

        Args:
            value: int, float or Decimal. Floats are converted through repr(),
                   so 0.1 becomes "0.1" and not its binary expansion.
            sign: When positive (negative), "+" ("-") is prepended to the text so
                  that the value is read as the upper (lower) side of an
                  asymmetric error.

        Raises:
            TypeError: If value is not int, float or Decimal (bool is rejected).
            ParseError: If value is not finite or does not fit a 64-bit mantissa; trailing
                        zeros of large integers are moved into the exponent first.

        Examples:
            >>> DecimalNumber.from_numeric(0.25)
            DecimalNumber(mantissa=25, exponent=-2, sign=0)
            >>> DecimalNumber.from_numeric(1e-5, sign=1).to_text()
            '0.00001'
            >>> DecimalNumber.from_numeric(3.0)
            DecimalNumber(mantissa=3, exponent=0, sign=0)
            >>> DecimalNumber.from_numeric(5e28)
            DecimalNumber(mantissa=5, exponent=28, sign=0)
        """
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise TypeError(f"value must be int | float | Decimal, but got {fmt_type(value)}")
        if isinstance(value, int):
            dec = Decimal(value)
        else:
            finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
            if not finite:
                raise ParseError(f"cannot convert {fmt_value(value)} to a decimal number")
            dec = value if isinstance(value, Decimal) else Decimal(repr(value))

        exponent = 0
        if dec.copy_abs() > MANTISSA_MAX and dec == dec.to_integral_value():
            # trailing zeros of large integers go into the exponent
            mantissa = int(dec.copy_abs())
            while mantissa > MANTISSA_MAX and mantissa % 10 == 0:
                mantissa //= 10
                exponent += 1
            text = ("-" if dec < 0 else "") + str(mantissa)
        else:
            text = format(dec, "f")
            if isinstance(value, float) and value.is_integer() and text.endswith(".0"):
                text = text[:-2]

        if sign > 0:
            text = "+" + text
        elif sign < 0:
            text = "-" + text
        number = cls.from_text(text)
        if exponent:
            number = replace(number, exponent=number.exponent + exponent)
        return number

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Parse a plain decimal literal.

        Leading and trailing whitespace is ignored. An optional leading "+" or "-"
        sets sign to +1 or -1, its absence leaves sign at 0. The remaining characters
        must be digits with at most one decimal point; scientific notation is not
        accepted.

        Raises:
            TypeError: If text is not a str.
            ParseError: On empty input, missing digits, multiple decimal points,
                        invalid characters or mantissa overflow.

        Examples:
            >>> DecimalNumber.from_text(" +0.30 ")
            DecimalNumber(mantissa=30, exponent=-2, sign=1)
            >>> DecimalNumber.from_text("120")
            DecimalNumber(mantissa=120, exponent=0, sign=0)
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, but got {fmt_type(text)}")

        body = text.strip()
        if not body:
            raise ParseError(f"empty number {fmt_value(text)}")

        sign = 0
        if body[0] == "+":
            sign, body = 1, body[1:]
        elif body[0] == "-":
            sign, body = -1, body[1:]

        dot = None
        digits = 0
        for i, c in enumerate(body):
            if c == ".":
                if dot is not None:
                    raise ParseError(f"multiple decimal points in {fmt_value(text)}")
                dot = i
            elif "0" <= c <= "9":
                digits += 1
            else:
                raise ParseError(f"invalid character {c!r} in {fmt_value(text)}")
        if digits == 0:
            raise ParseError(f"no digits in {fmt_value(text)}")

        mantissa = 0
        for c in body:
            if c == ".":
                continue
            d = ord(c) - ord("0")
            if mantissa > (MANTISSA_MAX - d) // 10:
                raise ParseError(f"mantissa overflow for {fmt_value(text)}")
            mantissa = mantissa * 10 + d

        exponent = 0 if dot is None else -(len(body) - dot - 1)
        return cls(mantissa=mantissa, exponent=exponent, sign=sign)

    @property
    def digits(self) -> int:
        """Number of decimal digits in the mantissa, zero counts as one digit."""
        return len(str(self.mantissa))

    def magnitude(self) -> Decimal:
        """Exact absolute value."""
        return Decimal(self.mantissa).scaleb(self.exponent)

    def to_decimal(self) -> Decimal:
        """Exact signed value, a zero sign counts as positive."""
        return self.magnitude() if self.sign >= 0 else -self.magnitude()

    def to_number(self) -> float:
        """
        Float value for error arithmetic; never used to produce text.

        Examples:
            >>> DecimalNumber.from_text("-0.2").to_number()
            -0.2
        """
        return float(self.to_decimal())

    def to_text(self, factorize: bool = False) -> str:
        """
        Render the number as a plain decimal string.

        Only a negative sign is printed; the "+" of upper errors and the "±" of
        symmetric errors belong to the renderer.

        Args:
            factorize: If True, print the bare mantissa digits whatever the exponent;
                       the power of ten is then written once for the whole measurement.

        Examples:
            >>> DecimalNumber(5, -3).to_text()
            '0.005'
            >>> DecimalNumber(1234, -2, sign=-1).to_text()
            '-12.34'
            >>> DecimalNumber(15, 2).to_text()
            '1500'
            >>> DecimalNumber(15, 2).to_text(factorize=True)
            '15'
        """
        mant = str(self.mantissa)
        out = "-" if self.sign < 0 else ""

        if self.exponent >= 0 or factorize:
            out += mant
            if not factorize:
                out += "0" * self.exponent
        else:
            shift = -self.exponent
            if shift >= len(mant):
                out += "0." + "0" * (shift - len(mant)) + mant
            else:
                out += mant[:-shift] + "." + mant[-shift:]
        return out
