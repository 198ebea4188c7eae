#!/usr/bin/env python3

import sys
import logging

from binexpr import main

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    sys.exit(main(sys.argv[1:]))
