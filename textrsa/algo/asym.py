# -*- coding: utf-8 -*-

"""textbook RSA over small primes, applied byte by byte"""

from .. import config
from ..utils import (KeyGenError, ModulusTooSmall, NoCoprimeExponentFound,
                     PrimeSearchExhausted, CipherError, nolog)
from ..message import Message
from .numt import is_prime, gcd, invmod, powmod

import collections

PublicKey = collections.namedtuple('PublicKey', ['e', 'n'])
PrivateKey = collections.namedtuple('PrivateKey', ['d', 'n'])

class KeyPair(collections.namedtuple('KeyPair', ['public', 'private'])):
    __slots__ = ()

    @property
    def n(self):
        return self.public.n

def totient(p, q):
    """Euler's totient of p * q for distinct primes p, q"""
    return (p - 1) * (q - 1)

def draw_prime(rng, lo, hi, max_draws=None, exclude=()):
    """rejection-sample a prime uniformly from [lo, hi]

    :param rng: a :class:`.rng.RandomSource`
    :param exclude: primes that are rejected as well
    :return: (prime, number of draws)
    """
    if max_draws is None:
        max_draws = config.MAX_PRIME_DRAWS
    for nr_draw in range(1, max_draws + 1):
        v = rng.randint(lo, hi)
        if is_prime(v) and v not in exclude:
            return v, nr_draw
    raise PrimeSearchExhausted(
        'no prime found in [{}, {}] after {} draws (excluding {})'.format(
            lo, hi, max_draws, list(exclude)))

def find_public_exponent(phi, start=None):
    """smallest e >= start with e < phi and gcd(e, phi) == 1; every int is
    tried, not only odd ones"""
    if start is None:
        start = config.FIRST_EXPONENT
    e = start
    while e < phi:
        if gcd(e, phi) == 1:
            return e
        e += 1
    raise NoCoprimeExponentFound(
        'no exponent in [{}, {}) is coprime with phi={}'.format(
            start, phi, phi))

def derive_keypair(p, q, *, min_modulus=None, log=nolog):
    """derive the keypair from two distinct primes

    :raise ModulusTooSmall: if ``p * q <= min_modulus``
    :rtype: :class:`KeyPair`
    """
    if min_modulus is None:
        min_modulus = config.MIN_MODULUS
    if not (is_prime(p) and is_prime(q)):
        raise KeyGenError('both numbers must be prime: p={} q={}'.format(
            p, q))
    if p == q:
        raise KeyGenError('p and q must be distinct: {}'.format(p))

    n = p * q
    phi = totient(p, q)
    log('n = p * q = {}'.format(n))
    log('phi = (p-1)*(q-1) = {}'.format(phi))
    if n <= min_modulus:
        raise ModulusTooSmall(
            'n = {} is too small (must be > {}); primes p = {}, q = {} are '
            'too small'.format(n, min_modulus, p, q))

    e = find_public_exponent(phi)
    d = invmod(e, phi)
    assert e * d % phi == 1, (e, d, phi)
    log('e = {} d = {}'.format(e, d))
    return KeyPair(PublicKey(e, n), PrivateKey(d, n))

def generate_keypair(rng, prime_range=None, *, max_draws=None, log=nolog):
    """draw two distinct random primes and derive a keypair from them

    :param rng: a :class:`.rng.RandomSource`
    :param prime_range: inclusive (lo, hi) range for prime candidates
    :return: (p, q, keypair)
    """
    if prime_range is None:
        prime_range = config.PRIME_RANGE
    lo, hi = prime_range
    p, nr = draw_prime(rng, lo, hi, max_draws)
    log('p = {} after {} draws'.format(p, nr))
    q, nr = draw_prime(rng, lo, hi, max_draws, exclude=(p, ))
    log('q = {} after {} draws'.format(q, nr))
    return p, q, derive_keypair(p, q, log=log)


class RSA:
    class Opr:
        """encryption or decryption operator on a single int"""
        def __init__(self, e, n):
            self._e = e
            self._n = n

        def __call__(self, x):
            x = int(x)
            if not 0 <= x < self._n:
                raise CipherError('value {} out of range [0, {})'.format(
                    x, self._n))
            return powmod(x, self._e, self._n)

    @classmethod
    def make_enc_dec_pair(cls, rng, prime_range=None):
        """make (encryptor, decryptor) opr pair"""
        _, _, keypair = generate_keypair(rng, prime_range)
        return cls.from_keypair(keypair)

    @classmethod
    def from_keypair(cls, keypair):
        return (cls.Opr(keypair.public.e, keypair.public.n),
                cls.Opr(keypair.private.d, keypair.private.n))


def encrypt(pubkey, message):
    """encrypt each byte independently: c = m ** e % n

    :type pubkey: :class:`PublicKey`
    :return: list of int in [0, n)
    """
    if not isinstance(message, Message):
        message = Message(message)
    encr = RSA.Opr(*pubkey)
    return [encr(m) for m in message]

def decrypt(privkey, ciphertext):
    """decrypt each value independently: m = c ** d % n

    :type privkey: :class:`PrivateKey`
    :rtype: :class:`.Message`
    """
    decr = RSA.Opr(*privkey)
    plain = [decr(c) for c in ciphertext]
    bad = [i for i in plain if i > 0xff]
    if bad:
        raise CipherError(
            'decrypted values out of byte range, wrong key? {}'.format(bad))
    return Message(plain, max_len=len(plain))
