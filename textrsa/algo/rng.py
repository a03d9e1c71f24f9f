# -*- coding: utf-8 -*-

"""seedable pseudo-random sources that key generation draws prime candidates
from"""

from abc import ABCMeta, abstractmethod
import numpy as np

class RandomSource(metaclass=ABCMeta):
    """interface required by key generation: a generator of uniformly
    distributed ints"""

    @abstractmethod
    def randint(self, lo, hi):
        """uniform random int in the inclusive range [lo, hi]"""


class MersenneTwister(RandomSource):
    """see https://en.wikipedia.org/wiki/Mersenne_Twister"""

    dtype = None
    """data type, word size"""

    _nmr = None
    """
    * n: degree of recurrence
    * m: middle word, an offset used in the recurrence relation defining
      the series x, 1 <= m < n
    * r: separation point of one word, or the number of bits of the lower
      bitmask, 0 <= r < w
    """

    _abcstudl = None
    """
    * a: coefficients of the rational normal form twist matrix
    * b, c: TGFSR(R) tempering bitmasks
    * s, t: TGFSR(R) tempering bit shifts
    * u, d, l: additional Mersenne Twister tempering bit shifts/masks
    """

    _f = None
    """constant in init"""

    _state = None
    _state_ret = None
    _index = None

    def __init__(self, seed):
        n, m, r = self._nmr
        w = self.word_bits
        mask = (1 << w) - 1
        self._index = n
        self._state = state = np.empty(n, dtype=self.dtype)
        prev = int(seed) & mask
        state[0] = prev
        for i in range(1, n):
            # computed with python ints to avoid numpy scalar overflow
            prev = (self._f * (prev ^ (prev >> (w-2))) + i) & mask
            state[i] = prev

    @property
    def word_bits(self):
        return np.dtype(self.dtype).itemsize * 8

    def __call__(self):
        n, m, r = self._nmr
        if self._index >= n:
            self._twist()
        ret = self._state_ret[self._index]
        self._index += 1
        return int(ret)

    def randint(self, lo, hi):
        """uniform random int in [lo, hi], rejecting the biased tail of the
        word range"""
        if hi < lo:
            raise ValueError('empty range: [{}, {}]'.format(lo, hi))
        span = hi - lo + 1
        top = 1 << self.word_bits
        if span > top:
            raise ValueError('range too wide for {}-bit words: {}'.format(
                self.word_bits, span))
        limit = top - top % span
        while True:
            v = self()
            if v < limit:
                return lo + v % span

    def _twist(self):
        n, m, r = self._nmr
        a, b, c, s, t, u, d, l = map(self.dtype, self._abcstudl)
        lower_mask = self.dtype((1 << r) - 1)
        upper_mask = ~lower_mask
        state = self._state
        for i in range(n):
            x = (state[i] & upper_mask) + (state[(i+1)%n] & lower_mask)
            xA = x >> 1
            if x & 1:
                xA ^= a
            state[i] = state[(i + m) % n] ^ xA

        ret = state ^ ((state >> u) & d)
        ret ^= (ret << s) & b
        ret ^= (ret << t) & c
        ret ^= ret >> l
        self._state_ret = ret

        self._index = 0


class MT19937(MersenneTwister):
    dtype = np.uint32
    _f = 1812433253
    _nmr = (624, 397, 31)
    _abcstudl = (0x9908B0DF,
                 0x9D2C5680, 0xEFC60000,
                 7, 15,
                 11, 0xFFFFFFFF, 18)


class NumpyRandom(RandomSource):
    """adaptor of :class:`numpy.random.Generator`"""

    _gen = None

    def __init__(self, seed=None):
        self._gen = np.random.default_rng(seed)

    def randint(self, lo, hi):
        if hi < lo:
            raise ValueError('empty range: [{}, {}]'.format(lo, hi))
        return int(self._gen.integers(lo, hi, endpoint=True))
