# -*- coding: utf-8 -*-

from . import config
from .utils import as_bytes, MessageError

import numpy as np
import collections.abc

class Message:
    """bounded sequence of byte values to be encrypted one by one

    actually wrapper of :class:`numpy.ndarray` with dtype uint8
    """

    _data = None

    def __init__(self, data, *, max_len=None):
        if max_len is None:
            max_len = config.MAX_MESSAGE_LEN

        if isinstance(data, Message):
            data = data._data

        if isinstance(data, np.ndarray):
            assert data.ndim == 1
            if data.dtype != np.uint8:
                data = data.tolist()
        elif not isinstance(data, (str, bytes, list, tuple)):
            assert isinstance(data, collections.abc.Iterable), type(data)
            data = list(map(int, data))
        data = as_bytes(data)

        if len(data) > max_len:
            raise MessageError('message too long: {} > {} bytes'.format(
                len(data), max_len))
        self._data = np.frombuffer(data, dtype=np.uint8).copy()

    @classmethod
    def from_line(cls, line, max_len=None):
        """build from a line of input: the trailing line terminator is
        stripped and the rest is truncated to *max_len* bytes; str is
        encoded as utf-8 first"""
        if max_len is None:
            max_len = config.MAX_MESSAGE_LEN
        line = as_bytes(line).rstrip(b'\r\n')
        return cls(line[:max_len], max_len=max_len)

    def __eq__(self, rhs):
        if not isinstance(rhs, Message):
            try:
                rhs = Message(rhs, max_len=len(self) + 1)
            except MessageError:
                return False
        return (len(self) == len(rhs) and
                bool(np.all(self._data == rhs._data)))

    def __getitem__(self, idx):
        ret = self._data[idx]
        if isinstance(ret, np.ndarray):
            return Message(ret, max_len=len(ret))
        return int(ret)

    def __iter__(self):
        return map(int, self._data)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return 'Message({!r})'.format(self.to_str())

    @property
    def np_data(self):
        """data as numpy array"""
        return self._data

    def to_bytes(self):
        return self._data.tobytes()

    def to_str(self):
        """interpret as utf-8 encoded str; invalid sequences, such as a
        character cut by truncation, are replaced"""
        return self._data.tobytes().decode('utf-8', errors='replace')

    def ascii_values(self):
        """byte values as list of int"""
        return list(self)
