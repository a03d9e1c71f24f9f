# -*- coding: utf-8 -*-

from ..utils import (check, assert_eq, assert_raises, RSAError, KeyGenError,
                     ModulusTooSmall, NoCoprimeExponentFound,
                     PrimeSearchExhausted, CipherError)
from ..config import bigtest
from ..algo.asym import (RSA, PublicKey, PrivateKey, KeyPair, derive_keypair,
                         generate_keypair, find_public_exponent, draw_prime,
                         totient, encrypt, decrypt)
from ..algo.numt import is_prime, gcd, powmod
from ..algo.rng import MT19937, RandomSource
from ..message import Message

import numpy as np

class ScriptedRandom(RandomSource):
    """replays a fixed sequence of draws"""

    def __init__(self, values):
        self._values = iter(values)
        self.nr_draws = 0

    def randint(self, lo, hi):
        v = next(self._values)
        assert lo <= v <= hi, (lo, v, hi)
        self.nr_draws += 1
        return v


def check_keypair_invariants(p, q, keypair, prime_range=(100, 1000)):
    lo, hi = prime_range
    e, n = keypair.public
    d, n1 = keypair.private
    phi = totient(p, q)
    assert p != q and is_prime(p) and is_prime(q), (p, q)
    assert lo <= p <= hi and lo <= q <= hi, (p, q)
    assert_eq(n, p * q)
    assert_eq(n1, n)
    assert n > 255, n
    assert_eq(gcd(e, phi), 1)
    assert 1 < e < phi, (e, phi)
    assert 0 <= d < phi, (d, phi)
    assert_eq(e * d % phi, 1)
    # e is the smallest candidate
    for i in range(3, e):
        assert gcd(i, phi) != 1, (i, phi)

def check_round_trip(keypair, values):
    e, n = keypair.public
    d, _ = keypair.private
    for v in values:
        v = int(v)
        assert_eq(powmod(powmod(v, e, n), d, n), v, (keypair, v))

@check
def asym_hi_with_fixed_primes():
    keypair = derive_keypair(101, 103)
    assert_eq(keypair, KeyPair(PublicKey(7, 10403), PrivateKey(8743, 10403)))
    assert_eq(keypair.n, 10403)
    assert_eq(totient(101, 103), 10200)
    check_keypair_invariants(101, 103, keypair)

    msg = Message('HI')
    assert_eq(msg.ascii_values(), [72, 73])
    encrypted = encrypt(keypair.public, msg)
    assert_eq(encrypted, [powmod(72, 7, 10403), powmod(73, 7, 10403)])
    assert_eq(encrypted, [pow(72, 7, 10403), pow(73, 7, 10403)])
    decrypted = decrypt(keypair.private, encrypted)
    assert_eq(decrypted, msg)
    assert_eq(decrypted.to_str(), 'HI')
    return encrypted

@check
def asym_modulus_too_small():
    exc = assert_raises(ModulusTooSmall, derive_keypair, 2, 3)
    assert isinstance(exc, KeyGenError) and isinstance(exc, RSAError)
    assert 'n = 6' in str(exc), str(exc)
    assert_raises(ModulusTooSmall, derive_keypair, 11, 23)
    assert_raises(ModulusTooSmall, derive_keypair, 3, 83)
    check_keypair_invariants(3, 89, derive_keypair(3, 89), (3, 89))

@check
def asym_derive_rejects_bad_primes():
    assert_raises(KeyGenError, derive_keypair, 100, 103)
    assert_raises(KeyGenError, derive_keypair, 101, 1000)
    assert_raises(KeyGenError, derive_keypair, 101, 101)

@check
def asym_public_exponent_scan():
    assert_eq(find_public_exponent(10200), 7)
    assert_eq(find_public_exponent(30), 7)
    assert_eq(find_public_exponent(12), 5)
    # every int is a candidate, even ones included
    assert_eq(find_public_exponent(9), 4)
    assert_raises(NoCoprimeExponentFound, find_public_exponent, 3)
    assert_raises(NoCoprimeExponentFound, find_public_exponent, 2)
    assert_raises(NoCoprimeExponentFound, find_public_exponent, 1)
    assert_raises(NoCoprimeExponentFound, find_public_exponent, 5, start=5)

@check
def asym_generate_keypair():
    rng = MT19937(2024)
    nr_keys = 50 if bigtest() else 10
    moduli = set()
    for _ in range(nr_keys):
        p, q, keypair = generate_keypair(rng, (100, 1000))
        check_keypair_invariants(p, q, keypair)
        check_round_trip(keypair, range(256))
        moduli.add(keypair.n)
    assert len(moduli) > 1, moduli

    logs = []
    p, q, keypair = generate_keypair(MT19937(1), log=logs.append)
    assert_eq(logs[0].startswith('p = {} after '.format(p)), True)
    assert_eq(logs[1].startswith('q = {} after '.format(q)), True)
    assert 'n = p * q = {}'.format(keypair.n) in logs, logs

@check
def asym_round_trip_all_values():
    rng = MT19937(99)
    if bigtest():
        keys = [generate_keypair(rng)[2] for _ in range(3)]
    else:
        keys = [generate_keypair(rng, (100, 160))[2]]
    for keypair in keys:
        check_round_trip(keypair, range(keypair.n))

    # sampled sweep over a full-size modulus
    keypair = generate_keypair(rng)[2]
    sample = np.random.RandomState(5).randint(0, keypair.n, size=2000)
    check_round_trip(keypair, sample)
    return len(keys)

@check
def asym_rejection_sampling():
    rng = ScriptedRandom([100, 101, 101, 102, 103])
    p, q, keypair = generate_keypair(rng, (100, 1000))
    assert_eq((p, q), (101, 103))
    assert_eq(rng.nr_draws, 5)
    assert_eq(keypair, derive_keypair(101, 103))

    assert_eq(draw_prime(ScriptedRandom([4, 6, 7]), 0, 10), (7, 3))
    assert_eq(draw_prime(ScriptedRandom([7, 7, 5]), 0, 10, exclude=(7, )),
              (5, 3))

@check
def asym_prime_search_exhausted():
    exc = assert_raises(PrimeSearchExhausted, generate_keypair,
                        MT19937(3), (114, 126), max_draws=50)
    assert isinstance(exc, KeyGenError)

    # only one prime in range, so q can never be found
    assert_raises(PrimeSearchExhausted, generate_keypair,
                  MT19937(3), (100, 102), max_draws=200)
    assert_raises(PrimeSearchExhausted, draw_prime,
                  ScriptedRandom([4] * 3), 0, 10, 3)

@check
def asym_cipher_properties():
    keypair = derive_keypair(101, 103)

    # no chaining: equal bytes give equal ciphertext
    encrypted = encrypt(keypair.public, 'AAAB')
    assert_eq(len(set(encrypted[:3])), 1)
    assert encrypted[3] != encrypted[0]

    # bytes above 127 survive, whether given raw or from utf-8 text
    msg = Message(b'caf\xe9 \xff\x00')
    assert_eq(decrypt(keypair.private, encrypt(keypair.public, msg)), msg)
    msg = Message('\u20ac \u00e9')
    assert_eq(decrypt(keypair.private, encrypt(keypair.public, msg)), msg)

    assert_eq(encrypt(keypair.public, [np.int64(72), np.int64(73)]),
              encrypt(keypair.public, 'HI'))
    assert_eq(encrypt(keypair.public, np.array([72, 73], dtype=np.int32)),
              encrypt(keypair.public, 'HI'))
    assert_eq(encrypt(keypair.public, ''), [])
    assert_eq(len(decrypt(keypair.private, [])), 0)

    assert_raises(CipherError, decrypt, keypair.private, [10403])
    assert_raises(CipherError, decrypt, keypair.private, [-1])
    assert_raises(CipherError, encrypt, PublicKey(3, 200), b'\xda')

    # a mismatched private key yields garbage that does not fit in a byte
    other = derive_keypair(107, 109)
    garbage = [powmod(c, other.private.d, keypair.n)
               for c in encrypt(keypair.public, 'HI')]
    if any(i > 0xff for i in garbage):
        assert_raises(CipherError, decrypt,
                      PrivateKey(other.private.d, keypair.n),
                      encrypt(keypair.public, 'HI'))

@check
def asym_enc_dec_opr():
    enc, dec = RSA.make_enc_dec_pair(MT19937(11))
    for x in (0, 1, 2, 72, 255):
        assert_eq(dec(enc(x)), x)
    enc, dec = RSA.from_keypair(derive_keypair(101, 103))
    assert_eq(enc(72), powmod(72, 7, 10403))
    assert_eq(dec(enc(10402)), 10402)
    assert_raises(CipherError, enc, 10403)
