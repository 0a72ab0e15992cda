import functools
import io

import pytest

from arenakit.fibonacci import BASE, IDENTITY, MOD, fib, main, mat_mul, mat_pow


def test_first_terms():
    assert fib(0) == 0
    assert fib(1) == 1


def test_recurrence_holds():
    for n in range(200):
        assert fib(n + 2) == (fib(n + 1) + fib(n)) % MOD


@pytest.mark.parametrize("n", [1, 2, 10, 1000, 10**9, 10**18])
def test_cassini_identity(n):
    lhs = (fib(n - 1) * fib(n + 1) - fib(n) ** 2) % MOD
    assert lhs == (-1) ** n % MOD


@pytest.mark.parametrize("n", [5, 12345, 10**15])
def test_doubling_identity(n):
    a, b = fib(n), fib(n + 1)
    assert fib(2 * n) == a * (2 * b - a) % MOD


def test_small_values_with_large_modulus_are_exact():
    for n in range(16):
        assert fib(n, 1000) == fib(n)


def test_custom_modulus_bounds_result():
    for n in range(0, 500, 7):
        assert 0 <= fib(n, 97) < 97


def test_mat_pow_zero_is_identity():
    assert mat_pow(BASE, 0) == IDENTITY


def test_mat_pow_matches_repeated_multiplication():
    expected = functools.reduce(lambda acc, _: mat_mul(acc, BASE), range(5), IDENTITY)
    assert mat_pow(BASE, 5) == expected


def test_mat_mul_with_identity():
    m = ((3, 4), (5, 6))
    assert mat_mul(m, IDENTITY) == m
    assert mat_mul(IDENTITY, m) == m


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        mat_pow(BASE, -1)
    with pytest.raises(ValueError):
        fib(-3)


def test_main_with_argument(capsys):
    assert main(["50"]) == 0
    assert capsys.readouterr().out == f"{fib(50)}\n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("90\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(fib(90))


def test_main_rejects_negative():
    with pytest.raises(SystemExit):
        main(["-5"])