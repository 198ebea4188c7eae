'''
Evaluation of arithmetic expressions written with binary numerals

An expression is a sequence of words built from the characters
0 1 ( ) + - * /
Each stage of the pipeline raises a subclass of EquationError on failure
'''

import enum
import logging
import operator
from collections import namedtuple

logger = logging.getLogger(__name__)

alphabet = frozenset('()01+-*/')
digits = frozenset('01')

# values are fixed width signed integers
WIDTH = 32


class EquationError (Exception):
    pass


class InvalidCharacterError (EquationError):
    pass


class InvalidTokenError (EquationError):
    pass


class NumberParseError (EquationError):
    pass


class ParenthesisMismatchError (EquationError):
    pass


class StackUnderflowError (EquationError):
    pass


class DivisionByZeroError (EquationError):
    pass


class MalformedExpressionError (EquationError):
    pass


class Operator (enum.Enum):
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    ADD = 'add'
    SUBTRACT = 'subtract'
    NEGATE = 'negate'


class TokenType (enum.Enum):
    OPERAND = 'operand'
    OPERATOR = 'operator'
    PAREN_OPEN = 'paren_open'
    PAREN_CLOSE = 'paren_close'


Token = namedtuple('Token', ['type', 'value'])

PAREN_OPEN = Token(TokenType.PAREN_OPEN, None)
PAREN_CLOSE = Token(TokenType.PAREN_CLOSE, None)


def operand(value):
    return Token(TokenType.OPERAND, value)


def operator_token(op):
    return Token(TokenType.OPERATOR, op)


precedence = {
    Operator.NEGATE: 2,
    Operator.MULTIPLY: 1,
    Operator.DIVIDE: 1,
    Operator.ADD: 0,
    Operator.SUBTRACT: 0,
}


def wrap(value, width=WIDTH):
    '''
    Wraps an integer to a signed two's complement integer of the given width
    '''
    mask = (1 << width) - 1
    value &= mask
    if value >> (width - 1):
        value -= 1 << width
    return value


def truncdiv(a, b):
    '''
    Integer division rounding toward zero
    '''
    if b == 0:
        raise DivisionByZeroError('Division by zero: {} / {}'.format(a, b))
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


operations = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: truncdiv,
}

unary_operations = {
    Operator.NEGATE: operator.neg,
}

operator_symbols = {
    '*': Operator.MULTIPLY,
    '/': Operator.DIVIDE,
    '+': Operator.ADD,
}


def validate(words):
    '''
    Checks that every character of every word is in the alphabet
    '''
    return all(ch in alphabet for word in words for ch in word)


def check_characters(words):
    '''
    Raises InvalidCharacterError for the first character outside the alphabet
    '''
    if validate(words):
        return
    word, ch = next((w, c) for w in words for c in w if c not in alphabet)
    raise InvalidCharacterError('Invalid character {!r} in {!r}'.format(ch, word))


def split_word(word):
    '''
    Splits a word into digit runs and single character symbols

    "(1001+" -> ["(", "1001", "+"]
    '''
    out = []
    run = ''
    for ch in word:
        if ch in digits:
            run += ch
        else:
            if run:
                out.append(run)
                run = ''
            out.append(ch)
    if run:
        out.append(run)
    return out


def split_words(words):
    '''
    Splits every word and joins the results in order
    '''
    return [symbol for word in words for symbol in split_word(word)]


def parse_binary(digit_run, width=WIDTH):
    '''
    Parses an unsigned binary numeral that must fit a signed integer
    '''
    try:
        value = int(digit_run, 2)
    except ValueError:
        raise NumberParseError('Unable to parse number: {!r}'.format(digit_run))
    if value > 2 ** (width - 1) - 1:
        raise NumberParseError('Number too large: {!r}'.format(digit_run))
    return value


def next_token(symbol, unary, width=WIDTH):
    '''
    Classifies one symbol

    unary is True when the symbol stands where a value may begin
    Returns the token and the new value of unary
    '''
    if symbol == '(':
        return PAREN_OPEN, True
    elif symbol == ')':
        return PAREN_CLOSE, False
    elif symbol in operator_symbols:
        return operator_token(operator_symbols[symbol]), True
    elif symbol == '-':
        if unary:
            return operator_token(Operator.NEGATE), True
        return operator_token(Operator.SUBTRACT), True
    elif symbol and all(ch in digits for ch in symbol):
        return operand(parse_binary(symbol, width)), False
    raise InvalidTokenError('Invalid token: {!r}'.format(symbol))


def tokenize(symbols, width=WIDTH):
    '''
    Converts split symbols into a token list
    '''
    tokens = []
    unary = True
    for symbol in symbols:
        token, unary = next_token(symbol, unary, width)
        tokens.append(token)
    return tokens


def infix2postfix(tokens):
    '''
    Converts an infix token list to postfix with the shunting yard algorithm
    '''
    stack = []
    output = []

    for token in tokens:
        if token.type == TokenType.OPERAND:
            output.append(token)
        elif token.type == TokenType.PAREN_OPEN:
            stack.append(token)
        elif token.type == TokenType.PAREN_CLOSE:
            if PAREN_OPEN not in stack:
                raise ParenthesisMismatchError('Missing open parenthesis')
            while stack[-1] != PAREN_OPEN:
                output.append(stack.pop())
            stack.pop()
        elif token.type == TokenType.OPERATOR and token.value in unary_operations:
            # prefix operators have no left operand to reduce
            stack.append(token)
        elif token.type == TokenType.OPERATOR:
            while stack:
                top = stack[-1]
                if top.type == TokenType.PAREN_OPEN:
                    break
                if top.type != TokenType.OPERATOR:
                    raise InvalidTokenError('Impossible token in operator stack: {}'.format(top))
                if precedence[top.value] < precedence[token.value]:
                    break
                output.append(stack.pop())
            stack.append(token)
        else:
            raise InvalidTokenError('Invalid token: {}'.format(token))

    if PAREN_OPEN in stack:
        raise ParenthesisMismatchError('Missing closing parenthesis')

    while stack:
        output.append(stack.pop())

    return output


def solve_postfix(tokens, width=WIDTH):
    '''
    Evaluates a postfix token list
    '''
    stack = []

    for token in tokens:
        if token.type == TokenType.OPERAND:
            stack.append(token.value)
        elif token.type == TokenType.OPERATOR and token.value in unary_operations:
            if len(stack) < 1:
                raise StackUnderflowError('Not enough operands for {}'.format(token.value.value))
            stack.append(wrap(unary_operations[token.value](stack.pop()), width))
        elif token.type == TokenType.OPERATOR:
            if len(stack) < 2:
                raise StackUnderflowError('Not enough operands for {}'.format(token.value.value))
            a, b = stack.pop(), stack.pop()
            stack.append(wrap(operations[token.value](b, a), width))
        else:
            raise InvalidTokenError('Invalid token in postfix expression: {}'.format(token))

    if len(stack) != 1:
        raise MalformedExpressionError('Expected one value, found {}'.format(len(stack)))

    return stack[0]


def solve(words, width=WIDTH):
    '''
    Runs check_characters, split_words, tokenize, infix2postfix and
    solve_postfix in order

    words is a list of words, a string is split on whitespace first
    '''
    if isinstance(words, str):
        words = words.split()
    check_characters(words)
    tokens = tokenize(split_words(words), width)
    postfix = infix2postfix(tokens)
    value = solve_postfix(postfix, width)
    logger.debug('%s = %d', ' '.join(words), value)
    return value


def to_binary(value, width=WIDTH):
    '''
    Renders an integer in binary

    Negative values are shown as their two's complement bit pattern
    '''
    if value < 0:
        value &= (1 << width) - 1
    return format(value, 'b')
