import pytest

from minishell_core.errors import ShellError
from minishell_core.parser import Node, parse_cmd
from minishell_core.tokens import NodeKind, Token

_KINDS = {
    "|": NodeKind.PIPE,
    "||": NodeKind.OR_OP,
    "&&": NodeKind.AND_OP,
    "(": NodeKind.L_PARE,
    ")": NodeKind.R_PARE,
    "<": NodeKind.REDIRECTS,
    ">": NodeKind.REDIRECTS,
    "<<": NodeKind.REDIRECTS,
    ">>": NodeKind.REDIRECTS,
}


def toks(*words):
    return [Token(w, _KINDS.get(w, NodeKind.CMD)) for w in words]


def cmd(*words, left=None, right=None):
    return Node(NodeKind.CMD, left=left, right=right, cmds=list(words))


def redir(*items):
    return Node(NodeKind.REDIRECTS, redirects=list(items))


def pipe(left, right):
    return Node(NodeKind.PIPE, left=left, right=right)


def and_(left, right):
    return Node(NodeKind.AND_OP, left=left, right=right)


def or_(left, right):
    return Node(NodeKind.OR_OP, left=left, right=right)


def sub(inner, right=None):
    return Node(NodeKind.RND_BRACKET, left=inner, right=right)


@pytest.mark.parametrize(
    "words, expected",
    [
        (["ls"], cmd("ls")),
        (["echo", "hello", "|", "cat"], pipe(cmd("echo", "hello"), cmd("cat"))),
        (
            ["sleep", "1", "|", "cat", "|", "echo", "where is "],
            pipe(cmd("sleep", "1"), pipe(cmd("cat"), cmd("echo", "where is "))),
        ),
        (
            ["echo", "hello", "|", "cat", "|", "ls", "42"],
            pipe(cmd("echo", "hello"), pipe(cmd("cat"), cmd("ls", "42"))),
        ),
        (["cat", "|", "cat", "|", "ls"], pipe(cmd("cat"), pipe(cmd("cat"), cmd("ls")))),
        (["ls", "||", "ls"], or_(cmd("ls"), cmd("ls"))),
        (["false", "||", "ls"], or_(cmd("false"), cmd("ls"))),
        (["true", "||", "ls"], or_(cmd("true"), cmd("ls"))),
        (["false", "||", "ls", "42"], or_(cmd("false"), cmd("ls", "42"))),
        (
            ["false", "||", "ls", "42", "||", "catx"],
            or_(or_(cmd("false"), cmd("ls", "42")), cmd("catx")),
        ),
        (["ls", "&&", "ls"], and_(cmd("ls"), cmd("ls"))),
        (["false", "&&", "ls"], and_(cmd("false"), cmd("ls"))),
        (["true", "&&", "ls"], and_(cmd("true"), cmd("ls"))),
        (["false", "&&", "ls", "42"], and_(cmd("false"), cmd("ls", "42"))),
        (
            ["false", "&&", "ls", "42", "&&", "catx"],
            and_(and_(cmd("false"), cmd("ls", "42")), cmd("catx")),
        ),
        (
            ["false", "||", "ls", "42", "&&", "catx"],
            and_(or_(cmd("false"), cmd("ls", "42")), cmd("catx")),
        ),
        (["(", "false", ")"], sub(cmd("false"))),
        (["(", "false", "|", "ls", ")"], sub(pipe(cmd("false"), cmd("ls")))),
        (
            ["false", "&&", "ls", "||", "echo", "hello"],
            or_(and_(cmd("false"), cmd("ls")), cmd("echo", "hello")),
        ),
        (
            ["false", "&&", "(", "ls", "||", "echo", "hello", ")"],
            and_(cmd("false"), sub(or_(cmd("ls"), cmd("echo", "hello")))),
        ),
        (
            ["false", "||", "ls", "||", "echo", "hello"],
            or_(or_(cmd("false"), cmd("ls")), cmd("echo", "hello")),
        ),
        (
            ["true", "||", "(", "ls", "||", "echo", "hello", ")"],
            or_(cmd("true"), sub(or_(cmd("ls"), cmd("echo", "hello")))),
        ),
        (
            ["(", "ls", "|", "echo", "first", ")", "&&",
             "(", "false", "||", "echo", "second", ")"],
            and_(
                sub(pipe(cmd("ls"), cmd("echo", "first"))),
                sub(or_(cmd("false"), cmd("echo", "second"))),
            ),
        ),
        (
            ["(", "sleep", "1", "&&", "echo", "first", ")", "&&",
             "(", "sleep", "2", "||", "echo", "second", ")"],
            and_(
                sub(and_(cmd("sleep", "1"), cmd("echo", "first"))),
                sub(or_(cmd("sleep", "2"), cmd("echo", "second"))),
            ),
        ),
    ],
)
def test_combination_cases(words, expected):
    assert parse_cmd(toks(*words)) == expected


def test_logical_then_pipe_binds_pipe_on_right():
    tree = parse_cmd(toks("a", "&&", "b", "|", "c"))
    assert tree == and_(cmd("a"), pipe(cmd("b"), cmd("c")))


def test_pipe_then_logical():
    tree = parse_cmd(toks("a", "|", "b", "&&", "c"))
    assert tree == and_(pipe(cmd("a"), cmd("b")), cmd("c"))


def test_redirect_only_is_redirect_node():
    assert parse_cmd(toks(">", "file")) == redir(">", "file")


@pytest.mark.parametrize("op", ["<", ">>", "<<"])
def test_single_redirect_operators(op):
    assert parse_cmd(toks(op, "target")) == redir(op, "target")


def test_trailing_redirect_goes_right():
    tree = parse_cmd(toks("echo", "Hello", ">", "output.txt"))
    assert tree == cmd("echo", "Hello", right=redir(">", "output.txt"))


def test_leading_and_trailing_redirects():
    tree = parse_cmd(toks("<", "in", "cat", ">", "out"))
    assert tree == cmd("cat", left=redir("<", "in"), right=redir(">", "out"))


def test_consecutive_redirects_collected_in_order():
    tree = parse_cmd(toks(">", "a", ">>", "b"))
    assert tree.redirects == [">", "a", ">>", "b"]
    assert tree.kind is NodeKind.REDIRECTS


def test_redirect_in_pipeline():
    tree = parse_cmd(toks("cat", ">", "file", "|", "grep", "abc"))
    assert tree == pipe(cmd("cat", right=redir(">", "file")), cmd("grep", "abc"))


def test_redirect_after_subshell_attaches_right():
    tree = parse_cmd(toks("(", "cat", ")", ">", "f"))
    assert tree == sub(cmd("cat"), right=redir(">", "f"))


def test_new_nodes_have_default_fd_and_no_op_value():
    tree = parse_cmd(toks("ls"))
    assert tree.fd_num == -1
    assert tree.op_val is None
    assert tree.redirects is None


def test_empty_input_raises():
    with pytest.raises(ShellError) as info:
        parse_cmd([])
    assert info.value.func_name == "parse_cmd_type"


def test_redirect_without_target_raises():
    with pytest.raises(ShellError) as info:
        parse_cmd(toks(">"))
    assert info.value.message == "redirect syntax error"


def test_redirect_followed_by_operator_raises():
    with pytest.raises(ShellError) as info:
        parse_cmd(toks(">", ">", "file"))
    assert info.value.func_name == "handle_redirect_array"


def test_unclosed_subshell_raises():
    with pytest.raises(ShellError) as info:
        parse_cmd(toks("(", "cat"))
    assert info.value.func_name == "parser_subshell"


def test_leading_pipe_raises():
    with pytest.raises(ShellError) as info:
        parse_cmd(toks("|", "cat"))
    assert info.value.message == "node is empty"


def test_trailing_pipe_raises():
    with pytest.raises(ShellError):
        parse_cmd(toks("cat", "|"))


def test_trailing_logical_operator_raises():
    with pytest.raises(ShellError):
        parse_cmd(toks("cat", "&&"))


def test_eof_token_is_not_consumed_as_word():
    tokens = toks("ls", "-l") + [Token(None, NodeKind.EOF)]
    assert parse_cmd(tokens) == cmd("ls", "-l")