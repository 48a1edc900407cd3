#
# Rounder - DecimalNumber Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from rounder.errors import ParseError
from rounder.number import DecimalNumber, MANTISSA_MAX


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDecimalNumberInit:
    """Tests for field validation of DecimalNumber."""

    def test_defaults(self):
        n = DecimalNumber()
        assert (n.mantissa, n.exponent, n.sign) == (0, 0, 0)

    def test_frozen(self):
        n = DecimalNumber(5, -1)
        with pytest.raises(FrozenInstanceError):
            n.mantissa = 6

    @pytest.mark.parametrize('kwargs', [
        pytest.param(dict(mantissa=1.5), id='float_mantissa'),
        pytest.param(dict(exponent="2"), id='str_exponent'),
        pytest.param(dict(sign=True), id='bool_sign'),
    ])
    def test_type_errors(self, kwargs):
        with pytest.raises(TypeError, match="must be int"):
            DecimalNumber(**kwargs)

    @pytest.mark.parametrize('kwargs, match', [
        pytest.param(dict(mantissa=-1), "mantissa", id='negative_mantissa'),
        pytest.param(dict(mantissa=MANTISSA_MAX + 1), "mantissa", id='mantissa_overflow'),
        pytest.param(dict(sign=2), "sign", id='bad_sign'),
    ])
    def test_value_errors(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            DecimalNumber(**kwargs)


class TestDecimalNumberFromText:
    """Tests for DecimalNumber.from_text() parsing."""

    @pytest.mark.parametrize('text, mantissa, exponent, sign', [
        pytest.param("1.5", 15, -1, 0, id='simple'),
        pytest.param("0.230", 230, -3, 0, id='trailing_zero_kept'),
        pytest.param("120", 120, 0, 0, id='integer'),
        pytest.param("+0.3", 3, -1, 1, id='upper'),
        pytest.param("-0.2", 2, -1, -1, id='lower'),
        pytest.param("  42.0  ", 420, -1, 0, id='whitespace'),
        pytest.param(".5", 5, -1, 0, id='leading_dot'),
        pytest.param("5.", 5, 0, 0, id='trailing_dot'),
        pytest.param("007", 7, 0, 0, id='leading_zeros'),
        pytest.param("0", 0, 0, 0, id='zero'),
        pytest.param("18446744073709551615", MANTISSA_MAX, 0, 0, id='max_mantissa'),
    ])
    def test_parse(self, text, mantissa, exponent, sign):
        n = DecimalNumber.from_text(text)
        assert (n.mantissa, n.exponent, n.sign) == (mantissa, exponent, sign)

    @pytest.mark.parametrize('text, match', [
        pytest.param("", "empty", id='empty'),
        pytest.param("   ", "empty", id='blank'),
        pytest.param("+", "no digits", id='sign_only'),
        pytest.param(".", "no digits", id='dot_only'),
        pytest.param("1.2.3", "multiple decimal points", id='two_dots'),
        pytest.param("1e5", "invalid character", id='exponent_notation'),
        pytest.param("1,5", "invalid character", id='comma'),
        pytest.param("--1", "invalid character", id='double_sign'),
        pytest.param("1 5", "invalid character", id='inner_space'),
        pytest.param("18446744073709551616", "overflow", id='mantissa_overflow'),
    ])
    def test_parse_errors(self, text, match):
        with pytest.raises(ParseError, match=match):
            DecimalNumber.from_text(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            DecimalNumber.from_text("abc")

    def test_non_str_raises_type_error(self):
        with pytest.raises(TypeError, match="must be str"):
            DecimalNumber.from_text(1.5)


class TestDecimalNumberFromNumeric:
    """Tests for DecimalNumber.from_numeric() conversion."""

    @pytest.mark.parametrize('value, sign, expected', [
        pytest.param(42, 0, (42, 0, 0), id='int'),
        pytest.param(-7, 0, (7, 0, -1), id='negative_int'),
        pytest.param(0.25, 0, (25, -2, 0), id='float'),
        pytest.param(0.1, 0, (1, -1, 0), id='float_shortest_repr'),
        pytest.param(3.0, 0, (3, 0, 0), id='integral_float'),
        pytest.param(1e-5, 0, (1, -5, 0), id='small_float'),
        pytest.param(1.5e3, 0, (1500, 0, 0), id='large_float'),
        pytest.param(0.3, 1, (3, -1, 1), id='upper_hint'),
        pytest.param(0.2, -1, (2, -1, -1), id='lower_hint'),
        pytest.param(Decimal("0.50"), 0, (50, -2, 0), id='decimal_keeps_zeros'),
        pytest.param(5e28, 0, (5, 28, 0), id='float_beyond_mantissa'),
        pytest.param(10 ** 25, 0, (1, 25, 0), id='large_int'),
        pytest.param(-3 * 10 ** 30, 0, (3, 30, -1), id='large_negative_int'),
        pytest.param(Decimal("4.5E+30"), 1, (45, 29, 1), id='large_decimal_upper'),
    ])
    def test_convert(self, value, sign, expected):
        n = DecimalNumber.from_numeric(value, sign)
        assert (n.mantissa, n.exponent, n.sign) == expected

    @pytest.mark.parametrize('value', [
        pytest.param(float('inf'), id='inf'),
        pytest.param(float('nan'), id='nan'),
        pytest.param(Decimal('Infinity'), id='decimal_inf'),
    ])
    def test_non_finite(self, value):
        with pytest.raises(ParseError, match="cannot convert"):
            DecimalNumber.from_numeric(value)

    @pytest.mark.parametrize('value', [
        pytest.param(True, id='bool'),
        pytest.param("1.5", id='str'),
        pytest.param(None, id='none'),
    ])
    def test_unsupported_types(self, value):
        with pytest.raises(TypeError):
            DecimalNumber.from_numeric(value)

    def test_large_integer_without_trailing_zeros(self):
        with pytest.raises(ParseError, match="overflow"):
            DecimalNumber.from_numeric(MANTISSA_MAX + 1)

    def test_negative_value_with_sign_hint_fails(self):
        with pytest.raises(ParseError):
            DecimalNumber.from_numeric(-0.2, sign=-1)


class TestDecimalNumberFromAny:
    """Tests for DecimalNumber.from_any() dispatch."""

    def test_passthrough(self):
        n = DecimalNumber(5, -1)
        assert DecimalNumber.from_any(n) is n

    def test_text(self):
        assert DecimalNumber.from_any("0.30") == DecimalNumber(30, -2)

    def test_number(self):
        assert DecimalNumber.from_any(0.3, sign=1) == DecimalNumber(3, -1, 1)


class TestDecimalNumberToText:
    """Tests for DecimalNumber.to_text() rendering."""

    @pytest.mark.parametrize('number, expected', [
        pytest.param(DecimalNumber(15, -1), "1.5", id='decimal'),
        pytest.param(DecimalNumber(5, -3), "0.005", id='leading_zeros'),
        pytest.param(DecimalNumber(123, -3), "0.123", id='shift_equals_digits'),
        pytest.param(DecimalNumber(1234, -2, -1), "-12.34", id='negative'),
        pytest.param(DecimalNumber(3, -1, 1), "0.3", id='upper_has_no_plus'),
        pytest.param(DecimalNumber(15, 2), "1500", id='positive_exponent'),
        pytest.param(DecimalNumber(0, 0), "0", id='zero'),
        pytest.param(DecimalNumber(0, -2), "0.00", id='zero_decimals'),
    ])
    def test_plain(self, number, expected):
        assert number.to_text() == expected
        assert str(number) == expected

    @pytest.mark.parametrize('number, expected', [
        pytest.param(DecimalNumber(15, 2), "15", id='positive_exponent'),
        pytest.param(DecimalNumber(15, -1), "15", id='negative_exponent'),
        pytest.param(DecimalNumber(4, -3, -1), "-4", id='negative'),
    ])
    def test_factorized(self, number, expected):
        assert number.to_text(factorize=True) == expected

    @pytest.mark.parametrize('text', [
        "1.5", "0.0023", "120", "-0.20", "123456789012345678", "0.000000000000000001", "-98765.4321", "0",
    ])
    def test_round_trip(self, text):
        n = DecimalNumber.from_text(text)
        again = DecimalNumber.from_text(n.to_text())
        assert (again.mantissa, again.exponent, again.sign) == (n.mantissa, n.exponent, n.sign)


class TestDecimalNumberValues:
    """Tests for numeric views of DecimalNumber."""

    @pytest.mark.parametrize('text, expected', [
        pytest.param("0.23", 0.23, id='symmetric'),
        pytest.param("+0.3", 0.3, id='upper'),
        pytest.param("-0.2", -0.2, id='lower'),
        pytest.param("1200", 1200.0, id='integer'),
    ])
    def test_to_number(self, text, expected):
        assert DecimalNumber.from_text(text).to_number() == pytest.approx(expected)

    def test_to_decimal_is_exact(self):
        assert DecimalNumber.from_text("-0.10").to_decimal() == Decimal("-0.10")
        assert DecimalNumber.from_text("-0.10").magnitude() == Decimal("0.1")

    @pytest.mark.parametrize('number, digits', [
        pytest.param(DecimalNumber(0), 1, id='zero'),
        pytest.param(DecimalNumber(7), 1, id='one'),
        pytest.param(DecimalNumber(354, -5), 3, id='three'),
        pytest.param(DecimalNumber(MANTISSA_MAX), 20, id='max'),
    ])
    def test_digits(self, number, digits):
        assert number.digits == digits
