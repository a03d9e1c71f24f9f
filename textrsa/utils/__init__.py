# -*- coding: utf-8 -*-

import pkgutil
import importlib
import os

import numpy as np

SRC_ROOT = os.path.join(os.path.dirname(__file__), os.path.pardir)

_all_checks = []

def check(func):
    """decorator to mark a function as a self-check entrypoint"""
    _all_checks.append(func)
    return func

def discover_checks():
    """import all modules of the package and return registered checks sorted
    by name"""
    for loader, module_name, is_pkg in pkgutil.walk_packages(
            [SRC_ROOT], __name__[:__name__.rfind('.')+1]):
        if not is_pkg:
            importlib.import_module(module_name)
    _all_checks.sort(key=lambda x: x.__name__)
    return _all_checks

def assert_eq(a, b, msg=None):
    check = lambda a, b: a == b
    if isinstance(a, np.ndarray):
        assert (isinstance(b, np.ndarray) and
                a.dtype == b.dtype and a.shape == b.shape), (a, b)

        check = lambda a, b: bool(np.all(a == b))

    if msg is not None:
        msg = '; {}'.format(msg)
    else:
        msg = ''
    assert check(a, b), 'assert_eq failed: a={!r} b={!r}{}'.format(a, b, msg)

def assert_raises(exc_type, func, *args, **kwargs):
    """assert that ``func(*args, **kwargs)`` raises *exc_type*

    :return: the exception object
    """
    try:
        func(*args, **kwargs)
    except exc_type as exc:
        return exc
    raise AssertionError('{} not raised by {}{}'.format(
        exc_type.__name__, getattr(func, '__name__', func), args))

def open_output(path, mode='w'):
    """open an output file, creating its directory when needed"""
    odir = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(odir):
        os.makedirs(odir)
    return open(path, mode)

def summarize_str(s, width=10):
    """summarize a string for display"""
    if isinstance(s, bytes):
        s = s.decode('utf-8', errors='replace')
    assert isinstance(s, str)
    if len(s) <= width * 2:
        return s
    return '{}...{}'.format(s[:width], s[-width:])

def as_bytes(val):
    """convert some value to bytes"""
    from ..message import Message
    if isinstance(val, str):
        val = val.encode('utf-8')
    elif isinstance(val, np.ndarray):
        assert val.dtype == np.uint8, val.dtype
        val = val.tobytes()
    elif isinstance(val, Message):
        val = val.to_bytes()
    elif isinstance(val, (list, tuple)):
        if not val:
            return bytes()
        assert all(isinstance(i, (int, np.integer)) for i in val), val
        val = list(map(int, val))
        if not all(0 <= i < 256 for i in val):
            raise MessageError('value out of byte range: {}'.format(val))
        val = bytes(val)
    assert isinstance(val, bytes), type(val)
    return val

def nolog(*args, **kwargs):
    """log sink that discards everything"""


class RSAError(RuntimeError):
    """base exception class for the toy RSA pipeline"""

class KeyGenError(RSAError):
    """key derivation failed"""

class ModulusTooSmall(KeyGenError):
    """n = p * q does not exceed the largest byte value"""

class NoCoprimeExponentFound(KeyGenError):
    """no e in [3, phi) is coprime with phi"""

class PrimeSearchExhausted(KeyGenError):
    """rejection sampling for a prime ran out of draws"""

class CipherError(RSAError):
    """exception class for encryption and decryption"""

class MessageError(RSAError):
    """message can not be represented as a byte sequence"""
