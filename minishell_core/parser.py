"""Recursive-descent parser that turns a token sequence into a command tree.

Grammar::

    command      : cmd_type command_tail
    command_tail : "|" cmd_type command_tail
                 | ("&&" | "||") cmd_type command_tail
                 | redirection
                 |
    cmd_type     : simple_command | subshell
    subshell     : "(" command ")"
    simple_command : redirection* wordlist redirection* | redirection+
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from minishell_core.errors import ShellError
from minishell_core.tokens import NodeKind, Token


@dataclass
class Node:
    """A node of the command tree.

    Command nodes carry their words in ``cmds``; redirection nodes carry
    alternating operators and targets in ``redirects``.
    """

    kind: NodeKind
    left: Node | None = None
    right: Node | None = None
    cmds: list[str] | None = None
    redirects: list[str] | None = None
    op_val: str | None = None
    fd_num: int = -1


class _Cursor:
    """Read position over a token sequence."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def at(self, kind: NodeKind) -> bool:
        token = self.peek()
        return token is not None and token.kind == kind

    def match(self, kind: NodeKind) -> bool:
        if self.at(kind):
            self._pos += 1
            return True
        return False

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise ShellError("parse_single_redirect", "token_list is NULL")
        self._pos += 1
        return token

    def take_while(self, kind: NodeKind) -> list[Token]:
        taken = []
        while self.at(kind):
            taken.append(self.advance())
        return taken


def parse_cmd(tokens: Iterable[Token]) -> Node:
    """Parse ``tokens`` into a command tree; raise ShellError on a syntax error."""
    return _parse_cmd(_Cursor(tokens))


def _parse_cmd(cur: _Cursor) -> Node:
    return _parse_cmd_tail(_parse_cmd_type(cur), cur)


def _parse_cmd_type(cur: _Cursor) -> Node:
    node = _parse_subshell(cur) if cur.at(NodeKind.L_PARE) else _simple_cmd(cur)
    if node is None:
        raise ShellError("parse_cmd_type", "node is empty")
    return node


def _simple_cmd(cur: _Cursor) -> Node | None:
    before = _parse_redirects(cur)
    words = _parse_words(cur)
    if words is None:
        return before
    node = Node(NodeKind.CMD, left=before, cmds=words)
    node.right = _parse_redirects(cur)
    return node


def _parse_subshell(cur: _Cursor) -> Node:
    if not cur.match(NodeKind.L_PARE):
        raise ShellError("parser_subshell", "syntax_error")
    node = Node(NodeKind.RND_BRACKET, left=_parse_cmd(cur))
    if not cur.match(NodeKind.R_PARE):
        raise ShellError("parser_subshell", "syntax_error")
    return node


def _parse_words(cur: _Cursor) -> list[str] | None:
    words = [token.word for token in cur.take_while(NodeKind.CMD)]
    return words or None


def _parse_redirects(cur: _Cursor) -> Node | None:
    if not cur.at(NodeKind.REDIRECTS):
        return None
    return Node(NodeKind.REDIRECTS, redirects=_parse_redirect_list(cur))


def _parse_redirect_list(cur: _Cursor) -> list[str]:
    redirects: list[str] = []
    while cur.at(NodeKind.REDIRECTS):
        redirects.append(cur.advance().word)
        if not cur.at(NodeKind.CMD):
            raise ShellError("handle_redirect_array", "redirect syntax error")
        redirects.append(cur.advance().word)
    return redirects


def _parse_cmd_tail(left: Node, cur: _Cursor) -> Node:
    while True:
        if cur.match(NodeKind.PIPE):
            left = _handle_pipe(left, cur)
        elif cur.at(NodeKind.AND_OP) or cur.at(NodeKind.OR_OP):
            left = _handle_logical_op(left, cur)
        elif cur.at(NodeKind.REDIRECTS):
            redirect_node = _parse_redirects(cur)
            if redirect_node is not None:
                left.right = redirect_node
        else:
            return left


def _handle_pipe(left: Node, cur: _Cursor) -> Node:
    node = Node(NodeKind.PIPE, left=left, right=_parse_cmd_type(cur))
    _extend_pipeline(node, cur)
    return node


def _extend_pipeline(parent: Node, cur: _Cursor) -> None:
    """Chain further pipes so that ``a | b | c`` nests to the right."""
    while cur.match(NodeKind.PIPE):
        child = Node(NodeKind.PIPE, left=parent.right)
        parent.right = child
        child.right = _parse_cmd_type(cur)
        parent = child


def _handle_logical_op(left: Node, cur: _Cursor) -> Node:
    if cur.match(NodeKind.AND_OP):
        kind = NodeKind.AND_OP
    elif cur.match(NodeKind.OR_OP):
        kind = NodeKind.OR_OP
    else:
        raise ShellError("create_logi_node", "Expected logical operator")
    node = Node(kind, left=left, right=_parse_cmd_type(cur))
    if cur.at(NodeKind.PIPE):
        node.right = _parse_cmd_tail(node.right, cur)
    return node