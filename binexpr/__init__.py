'''Calculator for arithmetic expressions written with binary numerals

Operands are runs of 0 and 1, operators are + - * / and unary -
Parentheses group subexpressions

Expressions can be given as command line arguments or typed at the prompt:
    bin-calc.py "(1001+1)" "*" 10
    bin-calc.py
    Enter your expression: -1 - -1
'''

import sys
import logging
from collections import OrderedDict

from .util import EquationError, WIDTH, solve, to_binary

logger = logging.getLogger(__name__)

default_prompt = 'Enter your expression: '
invalid_message = 'Not valid!'


def read_expression(prompt=default_prompt):
    '''
    Prompts for one line of input and splits it on whitespace
    '''
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    return line.split()


def process_expression(words, config=None):
    '''
    Prints the binary result of an expression or the invalid message
    '''
    if config is None:
        config = default_config()
    try:
        value = solve(words, config['width'])
    except EquationError as e:
        logger.debug('%s: %s', type(e).__name__, e)
        print(config['invalid'])
    else:
        print(to_binary(value, config['width']))


def default_config():
    return OrderedDict([
        ('prompt', default_prompt),
        ('invalid', invalid_message),
        ('width', WIDTH),
    ])


def main(args=None, **overrides):
    '''
    Evaluates the expression in args, or reads one from stdin when args is empty
    '''
    config = default_config()
    for name in overrides:
        if name not in config:
            raise TypeError('Unknown setting: {}'.format(name))
        config[name] = overrides[name]

    if args is None:
        args = sys.argv[1:]
    words = list(args)

    if not words:
        words = read_expression(config['prompt'])
        if not words:
            return 0

    process_expression(words, config)
    return 0
