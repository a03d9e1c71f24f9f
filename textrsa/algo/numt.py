# -*- coding: utf-8 -*-

"""number theory helper routines"""

import numpy as np

def is_prime(num):
    """decide primality of a small int by trial division with odd divisors"""
    assert isinstance(num, (int, np.integer)), type(num)
    num = int(num)
    if num <= 1:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False
    i = 3
    while i * i <= num:
        if num % i == 0:
            return False
        i += 2
    return True

def prime_sieve(limit):
    """sieve of Eratosthenes

    :return: boolean array ``r`` of length ``limit + 1`` where ``r[i]`` tells
        whether i is prime
    """
    assert limit >= 0
    ret = np.ones(limit + 1, dtype=bool)
    ret[:2] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if ret[i]:
            ret[i*i::i] = False
    return ret

def primes_in_range(lo, hi):
    """all primes in the inclusive range [lo, hi]"""
    if hi < max(lo, 2):
        return []
    return [i for i in map(int, np.flatnonzero(prime_sieve(hi)))
            if i >= lo]

def gcd(a, b):
    """greatest common divisor of non-negative ints; gcd(0, 0) == 0"""
    if a < 0 or b < 0:
        raise ValueError('gcd operands must be non-negative: {}, {}'.format(
            a, b))
    while b != 0:
        a, b = b, a % b
    return a

def egcd(a, b):
    """extended gcd

    :return: g, x, y such that x * a + y * b == g
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y

def invmod(e, phi):
    """solve d such that e * d === 1 (mod phi) and return it in [0, phi)

    e must be coprime with phi, otherwise the result is meaningless. For the
    degenerate modulus ``phi == 1`` there is no inverse and 0 is returned.
    """
    if phi < 1:
        raise ValueError('modulus must be positive: {}'.format(phi))
    if phi == 1:
        return 0

    m0 = phi
    x0, x1 = 0, 1
    while e > 1:
        if phi == 0:
            # e and phi share a factor
            break
        q = e // phi
        e, phi = phi, e % phi
        x0, x1 = x1 - q * x0, x0
    if x1 < 0:
        x1 += m0
    return x1

def powmod(base, exp, mod):
    """compute base ** exp % mod by square-and-multiply"""
    if mod < 1:
        raise ValueError('modulus must be positive: {}'.format(mod))
    if exp < 0:
        raise ValueError('exponent must be non-negative: {}'.format(exp))
    ret = 1 % mod
    base %= mod
    while exp > 0:
        if exp & 1:
            ret = ret * base % mod
        base = base * base % mod
        exp >>= 1
    return ret

def naive_powmod(base, exp, mod):
    """compute base ** exp % mod by repeated multiplication; O(exp)"""
    assert mod >= 1 and exp >= 0
    ret = 1 % mod
    for _ in range(exp):
        ret = ret * base % mod
    return ret
