"""Syntax scoring of navigation subsystem bracket lines."""

from __future__ import annotations

from enum import Enum


class ParseError(Exception):
    """Base class for bracket expression errors."""


class IncompleteError(ParseError):
    """The expression ended with brackets still open."""

    def __init__(self, stack: list[Token]) -> None:
        super().__init__("Expression incomplete")
        self.stack = stack


class CorruptedError(ParseError):
    """A closing bracket did not match the most recent open one."""

    def __init__(self, expected: Token, found: Token) -> None:
        super().__init__(
            f"Expression corrupted: expected {expected}, but found {found} instead"
        )
        self.expected = expected
        self.found = found


class InvalidCharError(ParseError):
    """A character that is not a bracket was found."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Found invalid character: {char}")
        self.char = char


class Token(Enum):
    OPEN_ROUND = "("
    CLOSE_ROUND = ")"
    OPEN_SQUARE = "["
    CLOSE_SQUARE = "]"
    OPEN_CURLY = "{"
    CLOSE_CURLY = "}"
    OPEN_ANGLE = "<"
    CLOSE_ANGLE = ">"

    @classmethod
    def from_char(cls, c: str) -> Token:
        try:
            return cls(c)
        except ValueError:
            raise InvalidCharError(c) from None

    def __str__(self) -> str:
        return self.value

    def matching(self) -> Token:
        return _MATCHING[self]

    def matches(self, token: Token) -> bool:
        return self.matching() is token

    def is_open(self) -> bool:
        return self in _OPENERS

    def is_close(self) -> bool:
        return not self.is_open()

    def error_score(self) -> int | None:
        return _ERROR_SCORES.get(self)

    def autocomplete_score(self) -> int | None:
        return _AUTOCOMPLETE_SCORES.get(self)


_PAIRS = [
    (Token.OPEN_ROUND, Token.CLOSE_ROUND),
    (Token.OPEN_SQUARE, Token.CLOSE_SQUARE),
    (Token.OPEN_CURLY, Token.CLOSE_CURLY),
    (Token.OPEN_ANGLE, Token.CLOSE_ANGLE),
]
_MATCHING = {**dict(_PAIRS), **{close: open_ for open_, close in _PAIRS}}
_OPENERS = frozenset(open_ for open_, _ in _PAIRS)
_ERROR_SCORES = {
    Token.CLOSE_ROUND: 3,
    Token.CLOSE_SQUARE: 57,
    Token.CLOSE_CURLY: 1197,
    Token.CLOSE_ANGLE: 25137,
}
_AUTOCOMPLETE_SCORES = {
    Token.CLOSE_ROUND: 1,
    Token.CLOSE_SQUARE: 2,
    Token.CLOSE_CURLY: 3,
    Token.CLOSE_ANGLE: 4,
}


def parse_expr(line: str) -> list[Token]:
    """Tokenize a complete, balanced line or raise the matching ParseError."""
    stack: list[Token] = []
    tokens: list[Token] = []
    for c in line:
        token = Token.from_char(c)
        tokens.append(token)
        if stack and token.is_close():
            expected = stack[-1]
            if not token.matches(expected):
                raise CorruptedError(expected.matching(), token)
            stack.pop()
        else:
            stack.append(token)
    if stack:
        raise IncompleteError(stack)
    return tokens


def build_completion_seq(stack: list[Token]) -> list[Token]:
    """Closing tokens needed to complete the open brackets on the stack."""
    return [token.matching() for token in reversed(stack)]


def part1(text: str) -> int:
    total = 0
    for line in text.splitlines():
        try:
            parse_expr(line)
        except CorruptedError as err:
            total += err.found.error_score() or 0
        except ParseError:
            pass
    return total


def _completion_score(stack: list[Token]) -> int:
    score = 0
    for token in build_completion_seq(stack):
        points = token.autocomplete_score()
        if points is None:
            raise ValueError(f"cannot complete with {token}")
        score = score * 5 + points
    return score


def part2(text: str) -> int:
    scores: list[int] = []
    for line in text.splitlines():
        try:
            parse_expr(line)
        except IncompleteError as err:
            scores.append(_completion_score(err.stack))
        except ParseError:
            pass
    if not scores:
        raise ValueError("no incomplete lines")
    return sorted(scores)[len(scores) // 2]