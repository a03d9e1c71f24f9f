# -*- coding: utf-8 -*-

"""default parameters; most can be overridden through environment variables"""

import os

def _getenv_int(name, default):
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val, 0)
    except ValueError:
        raise ValueError('environment variable {} must be an int: {!r}'.format(
            name, val)) from None

PRIME_RANGE = (_getenv_int('TEXTRSA_PRIME_LO', 100),
               _getenv_int('TEXTRSA_PRIME_HI', 1000))
"""inclusive range that prime candidates are drawn from"""

MIN_MODULUS = 255
"""n must be strictly larger than this so that every byte value is below n"""

MAX_MESSAGE_LEN = _getenv_int('TEXTRSA_MAX_MESSAGE_LEN', 99)
"""max number of bytes in a message (100-byte line buffer minus
terminator)"""

MAX_PRIME_DRAWS = _getenv_int('TEXTRSA_MAX_PRIME_DRAWS', 10000)
"""max number of candidates drawn while searching for one prime"""

FIRST_EXPONENT = 3
"""where the scan for a public exponent starts"""

def get_seed():
    """seed from environment, or None if not given"""
    return _getenv_int('TEXTRSA_SEED', None)

def bigtest():
    """whether exhaustive self-checks are requested"""
    return bool(os.getenv('TEXTRSA_BIGTEST'))
