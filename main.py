#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from textrsa.cli import main

import sys

if __name__ == '__main__':
    sys.exit(main())
