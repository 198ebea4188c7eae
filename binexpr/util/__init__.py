from .equations import (
    EquationError,
    InvalidCharacterError,
    InvalidTokenError,
    NumberParseError,
    ParenthesisMismatchError,
    StackUnderflowError,
    DivisionByZeroError,
    MalformedExpressionError,
    Operator,
    TokenType,
    Token,
    WIDTH,
    solve,
    to_binary,
)
