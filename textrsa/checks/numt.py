# -*- coding: utf-8 -*-

from ..utils import check, assert_eq, assert_raises
from ..config import bigtest
from ..algo.numt import (is_prime, prime_sieve, primes_in_range, gcd, egcd,
                         invmod, powmod, naive_powmod)

import numpy as np
import gmpy2

@check
def numt_is_prime_vs_sieve():
    limit = 100000 if bigtest() else 10000
    sieve = prime_sieve(limit)
    got = np.array([is_prime(i) for i in range(limit + 1)], dtype=bool)
    assert_eq(got, sieve)
    for i in range(limit + 1):
        assert_eq(bool(sieve[i]), bool(gmpy2.is_prime(i)), i)

    for i in range(-5, 2):
        assert_eq(is_prime(i), False, i)
    assert_eq(is_prime(2), True)
    assert_eq(is_prime(np.int64(97)), True)
    # perfect squares of odd primes must not slip through the sqrt bound
    for i in (9, 25, 49, 961, 994009):
        assert_eq(is_prime(i), False, i)

@check
def numt_is_prime_range_endpoints():
    assert_eq(is_prime(100), False)
    assert_eq(is_prime(1000), False)
    assert_eq(is_prime(101), True)
    assert_eq(is_prime(997), True)
    primes = primes_in_range(100, 1000)
    assert_eq(primes[0], 101)
    assert_eq(primes[-1], 997)
    assert_eq(len(primes), 143)
    assert_eq(primes_in_range(114, 126), [])
    assert_eq(primes_in_range(0, 1), [])
    assert_eq(primes_in_range(2, 3), [2, 3])
    return len(primes)

@check
def numt_gcd():
    assert_eq(gcd(0, 0), 0)
    assert_eq(gcd(12, 18), 6)
    assert_eq(gcd(7, 10200), 1)
    assert_eq(gcd(6, 10200), 6)

    rng = np.random.RandomState(17)
    for a, b in rng.randint(0, 10**6, size=(2000, 2)):
        a = int(a)
        b = int(b)
        g = gcd(a, b)
        assert_eq(g, gcd(b, a), (a, b))
        assert_eq(g, int(gmpy2.gcd(a, b)), (a, b))
        assert_eq(gcd(a, 0), a)
        assert_eq(gcd(0, a), a)

    assert_raises(ValueError, gcd, -4, 6)

@check
def numt_invmod():
    assert_eq(invmod(7, 10200), 8743)
    assert_eq(invmod(3, 1), 0)
    assert_eq(invmod(1, 2), 1)
    assert_raises(ValueError, invmod, 3, 0)

    rng = np.random.RandomState(23)
    nr_checked = 0
    for e, phi in rng.randint(1, 10**6, size=(3000, 2)):
        e = int(e)
        phi = int(phi) + 1
        if gcd(e, phi) != 1:
            continue
        d = invmod(e, phi)
        assert 0 <= d < phi, (e, phi, d)
        assert_eq(e * d % phi, 1, (e, phi))
        assert_eq(d, int(gmpy2.invert(e, phi)), (e, phi))
        nr_checked += 1
    assert nr_checked > 1000, nr_checked

    # e larger than phi
    assert_eq(invmod(10207, 10200), 8743)

@check
def numt_egcd():
    rng = np.random.RandomState(29)
    for a, b in rng.randint(0, 10**6, size=(500, 2)):
        a = int(a)
        b = int(b)
        g, x, y = egcd(a, b)
        assert_eq(g, gcd(a, b))
        assert_eq(x * a + y * b, g, (a, b))

@check
def numt_powmod_vs_naive():
    cases = [(0, 0, 1), (5, 0, 1), (5, 0, 7), (0, 5, 7), (2, 10, 1000),
             (123456, 10000, 10**6), (999999, 9999, 10**6 - 1),
             (72, 7, 10403), (73, 7, 10403)]
    rng = np.random.RandomState(31)
    nr_rand = 200 if bigtest() else 40
    for _ in range(nr_rand):
        mod = int(rng.randint(1, 10**6 + 1))
        cases.append((int(rng.randint(0, 10**7)),
                      int(rng.randint(0, 10**4 + 1)), mod))

    for base, exp, mod in cases:
        expect = naive_powmod(base, exp, mod)
        assert_eq(powmod(base, exp, mod), expect, (base, exp, mod))
        assert_eq(pow(base, exp, mod), expect, (base, exp, mod))

    for base, exp, mod in rng.randint(1, 2**62, size=(500, 3),
                                      dtype=np.int64):
        base, exp, mod = map(int, (base, exp, mod))
        assert_eq(powmod(base, exp, mod), pow(base, exp, mod))

@check
def numt_powmod_preconditions():
    assert_raises(ValueError, powmod, 3, 4, 0)
    assert_raises(ValueError, powmod, 3, 4, -7)
    assert_raises(ValueError, powmod, 3, -1, 7)
    assert_eq(powmod(-3, 3, 7), pow(-3, 3, 7))
