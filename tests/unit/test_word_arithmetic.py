"""
Тесты для модуля Word Arithmetic

Проверяет:
1. u256: математический модуль 2^256 (включая отрицательные входы)
2. s256: two's complement интерпретация
3. exp_word: square-and-multiply, x^0 == 1, редукция результата
4. u256_bytes: каноническое 32-байтовое кодирование
"""

import pytest

from src.core.math.bits import big_pow
from src.core.math.numerical_safeguards import (
    TT255,
    TT256,
    TT256M1,
    WordPreconditionViolation,
    is_signed_word,
    is_unsigned_word,
)
from src.core.math.parser import must_parse_big256
from src.core.math.word_arithmetic import exp_word, s256, u256, u256_bytes

# =============================================================================
# ТЕСТЫ U256
# =============================================================================


class TestU256:
    """Тесты для u256"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (1, 1),
            (big_pow(2, 255), big_pow(2, 255)),
            (big_pow(2, 256), 0),
            (big_pow(2, 256) + 1, 1),
            (-1, big_pow(2, 256) - 1),
            (-2, big_pow(2, 256) - 2),
        ],
    )
    def test_reference_values(self, value: int, expected: int) -> None:
        """Эталонные значения"""
        assert u256(value) == expected

    def test_in_range_values_unchanged(self) -> None:
        """Значения в [0, 2^256-1] не меняются"""
        for value in (0, 12345, TT255 - 1, TT255, TT256M1):
            assert u256(value) == value

    def test_result_always_canonical(self) -> None:
        """Результат всегда в [0, 2^256-1], даже для широких отрицательных"""
        for value in (-(2**300), -TT256, -TT256 - 1, 2**512 + 7):
            assert is_unsigned_word(u256(value))

    def test_congruent_modulo_2_256(self) -> None:
        """u256(x) ≡ x (mod 2^256)"""
        for value in (-(2**300) + 5, -12345, 3 * TT256 + 9):
            assert (u256(value) - value) % TT256 == 0

    def test_minimum_signed_word(self) -> None:
        """-2^255 отображается в 2^255"""
        assert u256(-TT255) == TT255


# =============================================================================
# ТЕСТЫ S256
# =============================================================================


class TestS256:
    """Тесты для s256"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (1, 1),
            (2, 2),
            (big_pow(2, 255) - 1, big_pow(2, 255) - 1),
            (big_pow(2, 255), -big_pow(2, 255)),
            (big_pow(2, 256) - 1, -1),
            (big_pow(2, 256) - 2, -2),
        ],
    )
    def test_reference_values(self, value: int, expected: int) -> None:
        """Эталонные значения"""
        assert s256(value) == expected

    def test_result_in_signed_range(self) -> None:
        """Результат всегда в [-2^255, 2^255-1]"""
        for value in (0, TT255 - 1, TT255, TT256M1):
            assert is_signed_word(s256(value))

    def test_recovers_residue_class_after_u256(self) -> None:
        """s256(u256(x)) == x для x в signed диапазоне"""
        for value in (-1, -2, -TT255, TT255 - 1, 0, 42):
            assert s256(u256(value)) == value

    def test_only_residue_class_for_out_of_range(self) -> None:
        """Для x вне signed диапазона восстанавливается только класс вычетов"""
        value = TT256 + 5
        assert s256(u256(value)) == 5
        assert s256(u256(value)) != value


# =============================================================================
# ТЕСТЫ EXP WORD
# =============================================================================


class TestExpWord:
    """Тесты для exp_word"""

    @pytest.mark.parametrize(
        ("base", "exponent", "expected"),
        [
            (0, 0, 1),
            (1, 0, 1),
            (1, 1, 1),
            (1, 2, 1),
            (
                3,
                144,
                must_parse_big256(
                    "507528786056415600719754159741696356908742250191663887263627442114881"
                ),
            ),
            (
                2,
                255,
                must_parse_big256(
                    "57896044618658097711785492504343953926634992332820282019728792003956564819968"
                ),
            ),
        ],
    )
    def test_reference_values(self, base: int, exponent: int, expected: int) -> None:
        """Эталонные значения"""
        assert exp_word(base, exponent) == expected

    def test_zero_exponent_for_any_base(self) -> None:
        """x^0 == 1 для любого основания"""
        for base in (0, 1, 2, TT256M1, TT256, -1):
            assert exp_word(base, 0) == 1

    def test_wraps_modulo_2_256(self) -> None:
        """Переполнение редуцируется по модулю 2^256"""
        assert exp_word(2, 256) == 0
        assert exp_word(2, 1000) == 0
        assert exp_word(TT256M1, 2) == 1
        assert exp_word(TT256M1, 3) == TT256M1

    def test_matches_builtin_pow(self) -> None:
        """Совпадает с pow(base, exp, 2^256)"""
        cases = [(3, 1000), (7, 2**70 + 3), (TT255 + 11, 12345), (0xDEADBEEF, 255)]
        for base, exponent in cases:
            assert exp_word(base, exponent) == pow(base, exponent, TT256)

    def test_negative_base_reduced(self) -> None:
        """Отрицательное основание приводится через u256"""
        assert exp_word(-1, 2) == 1
        assert exp_word(-1, 3) == TT256M1

    def test_result_always_canonical(self) -> None:
        """Результат в [0, 2^256-1]"""
        assert is_unsigned_word(exp_word(TT256 + 3, 5))

    def test_negative_exponent_forbidden(self) -> None:
        """Отрицательная экспонента — нарушение предусловия"""
        with pytest.raises(WordPreconditionViolation, match="exponent must be non-negative"):
            exp_word(2, -1)

    def test_non_int_arguments_rejected(self) -> None:
        """float аргументы отклоняются"""
        with pytest.raises(TypeError):
            exp_word(2, 1.0)


# =============================================================================
# ТЕСТЫ U256 BYTES
# =============================================================================


class TestU256Bytes:
    """Тесты для u256_bytes"""

    def test_always_32_bytes(self) -> None:
        """Кодирование всегда длиной 32 байта"""
        for value in (0, 1, -1, TT256M1, TT256 + 1):
            assert len(u256_bytes(value)) == 32

    def test_negative_values_twos_complement(self) -> None:
        """Отрицательные значения в two's complement"""
        assert u256_bytes(-1) == b"\xff" * 32
        assert u256_bytes(-2) == b"\xff" * 31 + b"\xfe"
        assert u256_bytes(-TT255) == b"\x80" + bytes(31)

    def test_wraps_wide_values(self) -> None:
        """2^256 + 1 кодируется как 1"""
        assert u256_bytes(TT256 + 1) == bytes(31) + b"\x01"
