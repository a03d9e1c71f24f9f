# -*- coding: utf-8 -*-

from textrsa.utils import discover_checks
from textrsa.cli import main

import io

import pytest

@pytest.mark.parametrize('check', discover_checks(),
                         ids=lambda x: x.__name__)
def test_check(check):
    check()

def test_check_runner():
    out = io.StringIO()
    assert main(['--check', 'numt_gcd', 'asym_hi_with_fixed_primes'],
                stdout=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == 'Run numt_gcd'
    assert lines[1].startswith('Run asym_hi_with_fixed_primes: [')

def test_unknown_check():
    with pytest.raises(KeyError):
        main(['--check', 'no_such_check'], stdout=io.StringIO())
