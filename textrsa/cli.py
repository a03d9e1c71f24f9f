# -*- coding: utf-8 -*-

"""command line entry: run the demo round-trip or the self-checks"""

from . import config
from .algo.rng import MT19937, NumpyRandom
from .message import Message
from .session import run
from .utils import discover_checks, open_output, nolog, RSAError

import argparse
import contextlib
import functools
import sys
import time

RNG_TYPES = {
    'mt19937': MT19937,
    'numpy': NumpyRandom,
}

def make_parser():
    parser = argparse.ArgumentParser(
        description='toy RSA: generate a keypair from two random primes and '
        'round-trip a message through it')
    parser.add_argument('-m', '--message',
                        help='message to encrypt; read one line from stdin '
                        'if not given')
    parser.add_argument('-s', '--seed', type=int, default=config.get_seed(),
                        help='seed of the random source; defaults to '
                        '$TEXTRSA_SEED, then the current time')
    parser.add_argument('--rng', choices=sorted(RNG_TYPES), default='mt19937',
                        help='random source type')
    parser.add_argument('--prime-range', type=int, nargs=2,
                        metavar=('LO', 'HI'), default=config.PRIME_RANGE,
                        help='inclusive range of prime candidates')
    parser.add_argument('--log', metavar='FILE',
                        help='write key generation progress to this file')
    parser.add_argument('--check', nargs='*', metavar='NAME',
                        help='run self-checks with given names; leave empty '
                        'for all checks')
    return parser

def run_checks(names, fout=sys.stdout):
    all_ch = discover_checks()
    if not names:
        ch = all_ch
    else:
        all_ch = {i.__name__: i for i in all_ch}
        ch = [all_ch[i] for i in names]

    for i in ch:
        print('Run {}'.format(i.__name__), end='', flush=True, file=fout)
        ret = i()
        if ret:
            print(': ', end='', file=fout)
            print(repr(ret), end='', file=fout)
        print(file=fout)

def read_message(stdin=sys.stdin, stdout=sys.stdout):
    print('Enter a message (max {} chars): '.format(config.MAX_MESSAGE_LEN),
          end='', flush=True, file=stdout)
    return Message.from_line(stdin.readline())

def main(argv=None, stdin=None, stdout=None, stderr=None):
    """:return: process exit code"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = make_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and args.seed < 0:
        parser.error('seed must be non-negative: {}'.format(args.seed))
    lo, hi = args.prime_range
    if lo > hi:
        parser.error('empty prime range: [{}, {}]'.format(lo, hi))
    if args.check is not None:
        run_checks(args.check, stdout)
        return 0

    seed = args.seed
    if seed is None:
        seed = int(time.time())
    rng = RNG_TYPES[args.rng](seed)

    with contextlib.ExitStack() as stack:
        log = nolog
        if args.log:
            fout = stack.enter_context(open_output(args.log))
            log = functools.partial(print, file=fout)
            log('seed={} rng={}'.format(seed, args.rng))

        try:
            if args.message is not None:
                message = Message.from_line(args.message)
            else:
                message = read_message(stdin, stdout)
            transcript = run(message, rng, (lo, hi), log=log)
        except RSAError as exc:
            log('failed: {}'.format(exc))
            print('Error: {}'.format(exc), file=stderr)
            return 1

    print(file=stdout)
    for line in transcript.report():
        print(line, file=stdout)
    return 0 if transcript.ok else 1
