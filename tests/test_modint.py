import pytest

from arenakit.modint import MOD, ModInt


def test_negative_values_are_normalised():
    x = ModInt(-1, 7)
    assert x + 1 == 0
    assert 0 <= x.value < 7


def test_default_modulus():
    assert ModInt(MOD + 5).value == 5
    assert ModInt().value == 0


def test_addition_and_subtraction_wrap():
    assert ModInt(5, 7) + ModInt(4, 7) == ModInt(9, 7)
    assert ModInt(2, 7) - 5 == ModInt(-3, 7)
    assert 10 - ModInt(3, 7) == ModInt(7, 7)
    assert 3 + ModInt(6, 7) == ModInt(9, 7)


def test_negation():
    for v in range(7):
        a = ModInt(v, 7)
        assert -a + a == 0
        assert +a == a


def test_division_roundtrip():
    for x in range(7):
        for y in range(1, 7):
            a, b = ModInt(x, 7), ModInt(y, 7)
            assert a / b * b == a


def test_inverse_property():
    for v in (1, 2, 3, 999999, MOD - 1):
        a = ModInt(v)
        assert a * a.inv() == 1
        assert 1 / a == a.inv()


def test_pow_matches_builtin():
    a = ModInt(123456, MOD)
    for k in (0, 1, 5, 10**12):
        assert a.pow(k).value == pow(123456, k, MOD)
    assert a**3 == a * a * a


def test_negative_pow_is_inverse():
    a = ModInt(42, 101)
    for k in (1, 2, 7, 250):
        assert a.pow(-k) * a.pow(k) == 1


def test_comparisons_use_reduced_value():
    assert ModInt(3, 7) < ModInt(5, 7)
    assert ModInt(8, 7) < ModInt(2, 7)
    assert ModInt(4, 7) >= 4
    assert ModInt(11, 7) == ModInt(4, 7)


def test_int_and_str():
    x = ModInt(10**9 + 8)
    assert int(x) == x.value
    assert str(x) == str(int(x))


def test_hash_consistent_with_equality():
    assert len({ModInt(1, 7), ModInt(8, 7), ModInt(15, 7)}) == 1


def test_mixed_moduli_rejected():
    with pytest.raises(ValueError):
        ModInt(1, 7) + ModInt(1, 11)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        ModInt(3, 7) / 0
    with pytest.raises(ZeroDivisionError):
        ModInt(0, 7).inv()


def test_invalid_modulus():
    with pytest.raises(ValueError):
        ModInt(1, 0)