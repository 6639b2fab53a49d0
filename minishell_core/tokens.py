"""Token kinds, tokens and the character classes used to split a command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minishell_core.errors import ShellError

_METACHARS = "|&;()<> \t\n"
_BLANKS = frozenset({" ", "\t", "\n"})


class NodeKind(Enum):
    """Kinds shared by lexer tokens and parse tree nodes."""

    REDIRECTS = auto()
    PIPE = auto()
    OR_OP = auto()
    AND_OP = auto()
    L_PARE = auto()
    R_PARE = auto()
    RND_BRACKET = auto()
    CMD = auto()
    FD_NUM = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A lexed word or operator."""

    word: str | None
    kind: NodeKind


_OPERATORS: tuple[tuple[str, NodeKind], ...] = (
    ("||", NodeKind.OR_OP),
    ("&&", NodeKind.AND_OP),
    ("|", NodeKind.PIPE),
    ("<<", NodeKind.REDIRECTS),
    (">>", NodeKind.REDIRECTS),
    ("<", NodeKind.REDIRECTS),
    (">", NodeKind.REDIRECTS),
    ("(", NodeKind.L_PARE),
    (")", NodeKind.R_PARE),
)


def operator_table() -> tuple[tuple[str, NodeKind], ...]:
    """Operators in matching order: longer spellings come before their prefixes."""
    return _OPERATORS


def fetch_first_operator(text: str | None) -> Token:
    """Return a token for the operator that begins ``text``."""
    if text is None:
        raise ShellError("fetch_fst_ope_token", "input is NULL")
    for op, kind in _OPERATORS:
        if text.startswith(op):
            return Token(op, kind)
    raise ShellError("fetch_fst_ope_token", "logically unexpected error")


def is_metachar(c: str) -> bool:
    """True for a single character that separates words."""
    return len(c) == 1 and c in _METACHARS


def is_word(text: str | None) -> bool:
    """True when ``text`` does not start with a metacharacter."""
    return text is not None and not is_metachar(text[:1])


def is_blank(c: str) -> bool:
    """True for space, tab or newline."""
    return c in _BLANKS


def is_operator(text: str | None) -> bool:
    """True when ``text`` begins with one of the known operators."""
    if text is None:
        raise ShellError("is_operator_or_metacharacter", "input is null")
    return any(text.startswith(op) for op, _ in _OPERATORS)


def is_single_quote(c: str) -> bool:
    """True for a single quote character."""
    return c == "'"


def is_double_quote(c: str) -> bool:
    """True for a double quote character."""
    return c == '"'