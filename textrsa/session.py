# -*- coding: utf-8 -*-

"""one full run: key generation followed by a message round-trip"""

from .algo.asym import generate_keypair, totient, encrypt, decrypt
from .message import Message
from .utils import nolog

import collections

class Transcript(collections.namedtuple('Transcript', [
        'p', 'q', 'n', 'phi', 'public', 'private',
        'message', 'encrypted', 'decrypted'])):
    """everything computed during a run"""

    __slots__ = ()

    @property
    def ok(self):
        """whether decryption reproduced the message"""
        return self.decrypted == self.message

    def report(self):
        """lines of a human readable report

        :rtype: iterator of str
        """
        def ascii_values(msg):
            return 'ASCII values: {}'.format(
                ' '.join(map(str, msg.ascii_values())))

        yield 'Generated Keys:'
        yield 'Generated prime numbers:'
        yield 'p = {}'.format(self.p)
        yield 'q = {}'.format(self.q)
        yield 'n = p * q = {}'.format(self.n)
        yield 'phi = (p-1)*(q-1) = {}'.format(self.phi)
        yield 'Public Key (e, n): ({}, {})'.format(*self.public)
        yield 'Private Key (d, n): ({}, {})'.format(*self.private)
        yield ''
        yield 'Original Message: {}'.format(self.message.to_str())
        yield ascii_values(self.message)
        yield ''
        yield 'Encrypted Values: {}'.format(
            ' '.join(map(str, self.encrypted)))
        yield ''
        yield 'Decrypted Message: {}'.format(self.decrypted.to_str())
        yield ascii_values(self.decrypted)


def run(message, rng, prime_range=None, *, max_draws=None, log=nolog):
    """generate a keypair, then encrypt and decrypt *message* with it

    :param message: :class:`.Message`, or anything it can be built from
    :param rng: a :class:`.algo.rng.RandomSource`
    :param log: callable taking a str, receives progress information
    :rtype: :class:`Transcript`
    """
    if not isinstance(message, Message):
        message = Message(message)
    p, q, keypair = generate_keypair(rng, prime_range, max_draws=max_draws,
                                     log=log)
    encrypted = encrypt(keypair.public, message)
    log('encrypted {} bytes'.format(len(encrypted)))
    decrypted = decrypt(keypair.private, encrypted)
    return Transcript(p=p, q=q, n=keypair.n, phi=totient(p, q),
                      public=keypair.public, private=keypair.private,
                      message=message, encrypted=encrypted,
                      decrypted=decrypted)
