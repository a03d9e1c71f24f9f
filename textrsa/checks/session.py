# -*- coding: utf-8 -*-

from ..utils import (check, assert_eq, assert_raises, as_bytes, summarize_str,
                     MessageError, RSAError)
from ..message import Message
from ..session import run, Transcript
from ..algo.asym import totient
from ..algo.numt import powmod
from ..algo.rng import MT19937
from ..cli import main

import numpy as np

import contextlib
import io
import os
import tempfile

@check
def session_message_bounds():
    assert_eq(Message.from_line('hello\n'), Message('hello'))
    assert_eq(Message.from_line('hello\r\n').to_str(), 'hello')
    assert_eq(Message.from_line(b'raw bytes\n').to_str(), 'raw bytes')
    assert_eq(Message.from_line('').to_str(), '')

    long_line = 'x' * 150 + '\n'
    assert_eq(len(Message.from_line(long_line)), 99)
    assert_eq(len(Message.from_line(long_line, max_len=10)), 10)
    assert_raises(MessageError, Message, 'y' * 100)
    Message('y' * 99)

    exc = assert_raises(MessageError, Message, [72, 256])
    assert isinstance(exc, RSAError)

    # str is utf-8, so one character may take several bytes
    msg = Message('H\xe9llo')
    assert_eq(msg.ascii_values(), [72, 195, 169, 108, 108, 111])
    assert_eq(msg[1], 195)
    assert_eq(msg[1:3].to_str(), '\xe9')
    assert_eq(msg.to_str(), 'H\xe9llo')
    assert_eq(as_bytes(msg), b'H\xc3\xa9llo')
    assert_eq(Message('price: €5').ascii_values()[-4:], [226, 130, 172, 53])

    # truncation counts bytes and may cut a character in half
    euro_line = '€' * 40 + '\n'
    cut = Message.from_line(euro_line)
    assert_eq(len(cut), 99)
    assert_eq(cut.to_str(), '€' * 33)
    assert_eq(len(Message.from_line(euro_line, max_len=4)), 4)
    assert_eq(Message.from_line(euro_line, max_len=4).to_str(), '€\ufffd')
    assert_raises(MessageError, Message, '€' * 34)

    assert_eq(msg.np_data.dtype, np.dtype(np.uint8))
    assert_eq(Message(np.array([72, 73])), 'HI')
    assert_eq(Message([np.int64(72), np.int64(73)]), 'HI')
    assert_eq(Message(x for x in (72, 73)), 'HI')
    assert msg != 'Hello'
    assert msg != 'x' * 99
    return summarize_str(long_line.strip())

@check
def session_run_transcript():
    logs = []
    tr = run('HI', MT19937(5), log=logs.append)
    assert isinstance(tr, Transcript)
    assert_eq(tr.ok, True)
    assert_eq(tr.n, tr.p * tr.q)
    assert_eq(tr.phi, totient(tr.p, tr.q))
    assert_eq(tr.public.n, tr.n)
    assert_eq(tr.private.n, tr.n)
    assert_eq(tr.decrypted.to_str(), 'HI')
    assert_eq(tr.encrypted, [powmod(i, tr.public.e, tr.n) for i in (72, 73)])
    assert_eq(logs[-1], 'encrypted 2 bytes')

    # same seed, same run
    assert_eq(run('HI', MT19937(5)), tr)

    lines = list(tr.report())
    assert_eq(lines[2], 'p = {}'.format(tr.p))
    assert 'Public Key (e, n): ({}, {})'.format(*tr.public) in lines
    assert 'Private Key (d, n): ({}, {})'.format(*tr.private) in lines
    assert 'Original Message: HI' in lines
    assert 'Decrypted Message: HI' in lines
    assert_eq(lines.count('ASCII values: 72 73'), 2)
    assert 'Encrypted Values: {} {}'.format(*tr.encrypted) in lines

@check
def session_cli():
    out, err = io.StringIO(), io.StringIO()
    ret = main(['--message', 'HI', '--seed', '7'], stdout=out, stderr=err)
    assert_eq(ret, 0)
    assert 'Decrypted Message: HI' in out.getvalue(), out.getvalue()
    assert_eq(err.getvalue(), '')

    out, err = io.StringIO(), io.StringIO()
    ret = main(['-m', 'price: €5', '-s', '1'], stdout=out, stderr=err)
    assert_eq(ret, 0)
    assert_eq(err.getvalue(), '')
    assert 'Original Message: price: €5\n' in out.getvalue(), out.getvalue()
    assert 'Decrypted Message: price: €5\n' in out.getvalue(), out.getvalue()
    assert 'ASCII values: {}\n'.format(
        ' '.join(map(str, b'price: \xe2\x82\xac5'))) in out.getvalue()

    out = io.StringIO()
    ret = main(['--seed', '3', '--rng', 'numpy'],
               stdin=io.StringIO('hello world\n'), stdout=out)
    assert_eq(ret, 0)
    assert out.getvalue().startswith('Enter a message (max 99 chars): ')
    assert 'Original Message: hello world\n' in out.getvalue()

    # range [2, 3] only yields p, q in {2, 3} so n = 6
    out, err = io.StringIO(), io.StringIO()
    ret = main(['-m', 'HI', '-s', '1', '--prime-range', '2', '3'],
               stdout=out, stderr=err)
    assert_eq(ret, 1)
    assert err.getvalue().startswith('Error: n = 6 is too small'), \
        err.getvalue()
    assert_eq(out.getvalue(), '')

    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = os.path.join(tmpdir, 'sub', 'run.log')
        ret = main(['-m', 'HI', '-s', '9', '--log', log_path],
                   stdout=io.StringIO())
        assert_eq(ret, 0)
        with open(log_path) as fin:
            log = fin.read()
    assert log.startswith('seed=9 rng=mt19937\n'), log
    assert 'phi = (p-1)*(q-1) = ' in log, log

@check
def session_cli_bad_arguments():
    def exit_code(argv):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            exc = assert_raises(SystemExit, main, argv, stdout=io.StringIO())
        return exc.code, err.getvalue()

    code, err = exit_code(['-m', 'HI', '--seed', '-1', '--rng', 'numpy'])
    assert_eq(code, 2)
    assert 'seed must be non-negative: -1' in err, err

    code, err = exit_code(['-m', 'HI', '-s', '1', '--prime-range', '1000',
                           '100'])
    assert_eq(code, 2)
    assert 'empty prime range: [1000, 100]' in err, err
