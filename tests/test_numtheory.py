import math

import pytest

from dsakit import numtheory
from dsakit.numtheory import ALT_MOD, MOD, BinomialTable


@pytest.mark.parametrize(
    "base,exponent,modulus",
    [(2, 10, MOD), (3, 200, 97), (123456789, 987654321, MOD), (7, 0, 13), (10, 5, 1)],
)
def test_power_mod_matches_builtin(base, exponent, modulus):
    assert numtheory.power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("a", [2, 3, 10, 12345])
def test_power_mod_fermat(a):
    assert numtheory.power_mod(a, MOD - 1, MOD) == 1
    assert numtheory.power_mod(a, ALT_MOD - 1, ALT_MOD) == 1


def test_power_mod_negative_exponent():
    with pytest.raises(ValueError):
        numtheory.power_mod(2, -1, MOD)


def test_power_mod_bad_modulus():
    with pytest.raises(ValueError):
        numtheory.power_mod(2, 3, 0)


def test_matrix_identity():
    m = [[3, 5], [7, 11]]
    identity = [[1, 0], [0, 1]]
    assert numtheory.matrix_multiply(identity, m) == m
    assert numtheory.matrix_multiply(m, identity) == m


def test_matrix_associative_mod():
    a = [[1, 2], [3, 4]]
    b = [[5, 6], [7, 8]]
    c = [[9, 1], [2, 3]]
    mul = numtheory.matrix_multiply
    assert mul(mul(a, b, 17), c, 17) == mul(a, mul(b, c, 17), 17)


def test_matrix_dimension_mismatch():
    with pytest.raises(ValueError):
        numtheory.matrix_multiply([[1, 2, 3]], [[1, 2]])


def test_fibonacci_source_value():
    assert numtheory.fibonacci(10) == 55


def test_fibonacci_base():
    assert numtheory.fibonacci(0) == 0
    assert numtheory.fibonacci(1) == numtheory.fibonacci(2)


@pytest.mark.parametrize("n", range(2, 60))
def test_fibonacci_recurrence(n):
    fib = numtheory.fibonacci
    assert fib(n) == (fib(n - 1) + fib(n - 2)) % MOD


def test_fibonacci_large_reduced():
    value = numtheory.fibonacci(10**18)
    assert 0 <= value < MOD
    assert value == (numtheory.fibonacci(10**18 - 1) + numtheory.fibonacci(10**18 - 2)) % MOD


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        numtheory.fibonacci(-1)


def test_prime_sieve_small():
    flags = numtheory.prime_sieve(30)
    assert [i for i, is_prime in enumerate(flags) if is_prime] == [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
    ]


def test_prime_sieve_composites_marked():
    limit = 500
    flags = numtheory.prime_sieve(limit)
    assert len(flags) == limit + 1
    assert not flags[0] and not flags[1]
    for a in range(2, limit + 1):
        for b in range(2, limit // a + 1):
            assert not flags[a * b]


def test_prime_sieve_negative():
    with pytest.raises(ValueError):
        numtheory.prime_sieve(-5)


@pytest.mark.parametrize("modulus", [MOD, ALT_MOD])
def test_ncr_matches_comb(modulus):
    table = BinomialTable(60, modulus)
    for n in range(61):
        for r in range(n + 1):
            assert table.ncr(n, r) == math.comb(n, r) % modulus


def test_choose_equals_ncr():
    table = BinomialTable(100, ALT_MOD)
    for n in range(0, 101, 7):
        for r in range(n + 1):
            assert table.choose(n, r) == table.ncr(n, r)


def test_pascal_identity():
    table = BinomialTable(200)
    for n in range(1, 201, 13):
        for r in range(1, n + 1):
            assert table.ncr(n, r) == (table.ncr(n - 1, r - 1) + table.ncr(n - 1, r)) % MOD


def test_ncr_out_of_range_is_zero():
    table = BinomialTable(10)
    assert table.ncr(3, 5) == 0
    assert table.ncr(-1, 0) == 0
    assert table.ncr(4, -2) == 0


def test_choose_invalid_raises():
    table = BinomialTable(10)
    with pytest.raises(ValueError):
        table.choose(3, 5)


def test_beyond_limit_raises():
    table = BinomialTable(10)
    with pytest.raises(ValueError):
        table.ncr(11, 2)
    with pytest.raises(ValueError):
        table.choose(11, 2)


def test_table_invalid_arguments():
    with pytest.raises(ValueError):
        BinomialTable(-1)
    with pytest.raises(ValueError):
        BinomialTable(5, 1)