"""
Tests for routing between the calculators and for verification.

The branch is a plain modulus comparison: modulus == radix + 1 goes to the
hybrid calculator, anything else to the pure one.
"""

import pytest

from iso7064.charsets import (
    ALPHA,
    ALPHANUMERIC,
    ALPHANUMERIC_WITH_STAR,
    HEX,
    NUMERIC,
    NUMERIC_WITH_X,
)
from iso7064.engine import dispatch
from iso7064.engine.dispatch import calculate_check_digit, verify_check_digit
from iso7064.engine.resolver import InvalidCharacterSet

# Every (charset, double_digit) combination that resolves to a scheme.
VALID_MODES = [
    (NUMERIC, False),
    (NUMERIC, True),
    (HEX, False),
    (HEX, True),
    (ALPHA, False),
    (ALPHA, True),
    (ALPHANUMERIC, False),
    (ALPHANUMERIC, True),
    (NUMERIC_WITH_X, False),
    (ALPHANUMERIC_WITH_STAR, False),
]

SAMPLE_VALUES = {
    NUMERIC: ["0", "794", "0794", "123456789012345678"],
    HEX: ["0", "1A", "DEADBEEF", "0123456789abcdef"],
    ALPHA: ["A", "ABC", "JEJLMGJ", "thequickbrownfox"],
    ALPHANUMERIC: ["Z", "ISO79", "A12425GABC1234002", "b7x9q2"],
    NUMERIC_WITH_X: ["0", "079", "0794", "9999999999"],
    ALPHANUMERIC_WITH_STAR: ["G", "G123489654321", "HELLO123"],
}


@pytest.fixture
def spy(monkeypatch):
    """Record which calculator the dispatcher picked."""
    calls = []

    def fake_pure(value, radix, modulus, charset, double_digit):
        calls.append(("pure", radix, modulus))
        return value

    def fake_hybrid(value, charset):
        calls.append(("hybrid", len(charset)))
        return value

    monkeypatch.setattr(dispatch, "calculate_pure_system_check_digit", fake_pure)
    monkeypatch.setattr(dispatch, "calculate_hybrid_system_check_digit", fake_hybrid)
    return calls


class TestRouting:
    @pytest.mark.parametrize("charset", [NUMERIC, HEX, ALPHA, ALPHANUMERIC])
    def test_single_digit_plain_alphabets_use_hybrid(self, spy, charset):
        calculate_check_digit("1", charset, False)
        assert spy == [("hybrid", len(charset))]

    @pytest.mark.parametrize(
        "charset,modulus", [(NUMERIC, 97), (HEX, 251), (ALPHA, 661), (ALPHANUMERIC, 1271)]
    )
    def test_double_digit_uses_pure(self, spy, charset, modulus):
        calculate_check_digit("1", charset, True)
        assert spy == [("pure", len(charset), modulus)]

    def test_mod_11_2_uses_pure(self, spy):
        calculate_check_digit("1", NUMERIC_WITH_X, False)
        assert spy == [("pure", 2, 11)]

    def test_mod_37_2_uses_pure(self, spy):
        calculate_check_digit("1", ALPHANUMERIC_WITH_STAR, False)
        assert spy == [("pure", 2, 37)]


class TestCalculate:
    def test_numeric_single(self):
        assert calculate_check_digit("0794", NUMERIC) == "07945"

    def test_numeric_double(self):
        assert calculate_check_digit("794", NUMERIC, True) == "79444"

    def test_mod_11_2(self):
        assert calculate_check_digit("0794", NUMERIC_WITH_X) == "07940"

    def test_alphanumeric_double(self):
        assert calculate_check_digit("ISO79", ALPHANUMERIC, True) == "ISO793W"

    def test_unsupported_charset_raises(self):
        with pytest.raises(InvalidCharacterSet):
            calculate_check_digit("123", "01234", False)

    @pytest.mark.parametrize("charset", [NUMERIC_WITH_X, ALPHANUMERIC_WITH_STAR])
    def test_special_alphabets_reject_double_digit(self, charset):
        with pytest.raises(InvalidCharacterSet):
            calculate_check_digit("123", charset, True)

    @pytest.mark.parametrize("charset,double_digit", VALID_MODES)
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_gives_none(self, charset, double_digit, value):
        assert calculate_check_digit(value, charset, double_digit) is None

    @pytest.mark.parametrize("charset,double_digit", VALID_MODES)
    def test_foreign_character_gives_none(self, charset, double_digit):
        assert calculate_check_digit("#", charset, double_digit) is None
        assert calculate_check_digit("1#2", charset, double_digit) is None


class TestVerify:
    @pytest.mark.parametrize("charset,double_digit", VALID_MODES)
    def test_round_trip(self, charset, double_digit):
        for value in SAMPLE_VALUES[charset]:
            full = calculate_check_digit(value, charset, double_digit)
            assert full is not None
            assert verify_check_digit(full, charset, double_digit)
            assert verify_check_digit(full.lower(), charset, double_digit)

    def test_reference_values(self):
        assert verify_check_digit("07945", NUMERIC)
        assert verify_check_digit("79444", NUMERIC, True)
        assert verify_check_digit("07940", NUMERIC_WITH_X)
        assert verify_check_digit("079x", NUMERIC_WITH_X)
        assert verify_check_digit("G123489654321Y", ALPHANUMERIC_WITH_STAR)
        assert verify_check_digit("ISO793W", ALPHANUMERIC, True)
        assert verify_check_digit("JEJLMGJS", ALPHA)

    def test_wrong_check_digit(self):
        assert not verify_check_digit("07946", NUMERIC)
        assert not verify_check_digit("79445", NUMERIC, True)
        assert not verify_check_digit("ISO793X", ALPHANUMERIC, True)

    @pytest.mark.parametrize("value", [None, "", "5"])
    def test_too_short_single(self, value):
        assert verify_check_digit(value, NUMERIC) is False

    @pytest.mark.parametrize("value", [None, "", "4", "44"])
    def test_too_short_double(self, value):
        assert verify_check_digit(value, NUMERIC, True) is False

    def test_foreign_character_is_false_not_an_error(self):
        assert verify_check_digit("07#45", NUMERIC) is False

    def test_other_scheme_check_digit_fails(self):
        # "07940" is valid MOD 11,2 but not MOD 11,10.
        assert not verify_check_digit("07940", NUMERIC)

    def test_unsupported_charset_raises(self):
        with pytest.raises(InvalidCharacterSet):
            verify_check_digit("12345", "01234")


class TestVerifyWithExplicitParameters:
    def test_pure(self):
        assert verify_check_digit("07940", NUMERIC_WITH_X, radix=2, modulus=11)
        assert verify_check_digit("79444", NUMERIC, True, radix=10, modulus=97)

    def test_hybrid(self):
        assert verify_check_digit("07945", NUMERIC, radix=10, modulus=11)
        assert not verify_check_digit("07944", NUMERIC, radix=10, modulus=11)

    def test_explicit_parameters_bypass_resolution(self):
        # Resolution rejects double-digit over the MOD 11,2 alphabet; explicit parameters do not.
        with pytest.raises(InvalidCharacterSet):
            verify_check_digit("079450", NUMERIC_WITH_X, True)
        assert verify_check_digit("079450", NUMERIC_WITH_X, True, radix=2, modulus=11)

    def test_radix_without_modulus_is_rejected(self):
        with pytest.raises(TypeError):
            verify_check_digit("07945", NUMERIC, radix=10)
        with pytest.raises(TypeError):
            verify_check_digit("07945", NUMERIC, modulus=11)


class TestCaseFolding:
    """Uppercasing is per character and never changes the length."""

    @pytest.mark.parametrize("value", ["ß", "ﬁ", "STRAßE", "ﬁX"])
    @pytest.mark.parametrize("double_digit", [False, True])
    def test_multi_character_uppercase_is_not_in_alphabet(self, value, double_digit):
        assert calculate_check_digit(value, ALPHA, double_digit) is None

    def test_verify_rejects_expanding_characters(self):
        # "ß".upper() == "SS" and "SS" + "Z" is valid MOD 27,26.
        assert calculate_check_digit("SS", ALPHA) == "SSZ"
        assert not verify_check_digit("ßZ", ALPHA)
        assert not verify_check_digit("ﬁS", ALPHA)

    def test_plain_lowercase_still_folds(self):
        assert calculate_check_digit("jejlmgj", ALPHA) == "JEJLMGJS"
        assert verify_check_digit("jejlmgjs", ALPHA)
