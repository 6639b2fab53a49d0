# minishell-core

This library holds the building blocks of a small POSIX-style shell. It is
written in plain Python and needs no third-party packages.

## Modules

### `minishell_core.tokens`

- `NodeKind` is an enum. It is shared by lexer tokens and parse-tree nodes. Its
  members are `REDIRECTS`, `PIPE`, `OR_OP`, `AND_OP`, `L_PARE`, `R_PARE`,
  `RND_BRACKET`, `CMD`, `FD_NUM` and `EOF`.
- `Token(word, kind)` is a frozen dataclass.
- `operator_table()` returns the operators in the order they are matched:
  `||`, `&&`, `|`, `<<`, `>>`, `<`, `>`, `(`, `)`.
- `fetch_first_operator(text)` returns a `Token` for the operator at the start
  of `text`. It raises `ShellError` when `text` is `None` or does not begin with
  an operator.
- Character checks:
  - `is_metachar(c)`: true for one of `| & ; ( ) < >`, space, tab or newline.
  - `is_word(text)`: true when `text` does not start with a metacharacter.
  - `is_blank(c)`: true for space, tab or newline.
  - `is_operator(text)`: true when `text` starts with a known operator. It
    raises `ShellError` for `None`.
  - `is_single_quote(c)` and `is_double_quote(c)`.

### `minishell_core.parser`

`parse_cmd(tokens)` turns an iterable of `Token`s into a tree of `Node`
dataclasses. Each `Node` has the fields `kind`, `left`, `right`, `cmds`,
`redirects`, `op_val` and `fd_num`.

The tree is built as follows:

- Words (`CMD` tokens) become a `CMD` node with the words in `cmds`.
- Redirections become a `REDIRECTS` node. Its `redirects` list holds each
  operator followed by its target. Redirections that come before the words go
  on the command's `left`. Redirections that come after the words go on its
  `right`. A command made only of redirections is the `REDIRECTS` node itself.
- `a | b | c` gives `PIPE` nodes that nest to the right.
- `&&` and `||` give `AND_OP` and `OR_OP` nodes.
- `( ... )` gives a `RND_BRACKET` node with the inner command on `left`.

Syntax errors raise `ShellError`. These include a missing `)`, a redirection
with no target word, and an empty command.

### `minishell_core.envmap`

`EnvMap` is an ordered map of shell variables:

- `get(name)` returns the value, or `None`.
- `set(name, value)` adds or updates a variable.
- `put("NAME=VALUE", allow_empty_value)` adds or updates from a string.
- `unset(name)` removes a variable.
- `size(count_null_value)` counts variables. Those without a value are counted
  only when `count_null_value` is true.
- `environ()` returns `NAME=VALUE` strings for every variable that has a value.

Names must be valid identifiers. A valid identifier is a letter or underscore,
followed by letters, digits or underscores; otherwise `set` and `unset` raise
`ValueError`. A variable may have the value `None`. When you iterate, the
newest names come first, and updating a variable keeps its place.

Helpers:

- `is_identifier(s)`
- `split_name_value(string, allow_empty_value)`. It raises `ValueError` when
  there is no `=` and empty values are not allowed.
- `item_string(name, value)`

`init_env(envp, cwd=None)` builds a map from `NAME=VALUE` strings and skips
malformed ones. It then sets defaults for any that are missing:

- `SHLVL` becomes `1`.
- `PWD` becomes `cwd`, or the process's working directory.
- `OLDPWD` becomes `/home/user/Downloads`.

### `minishell_core.signals`

- `ignore_signal(signum)` makes the process ignore a signal.
- `SignalWatcher`:
  - `install()` ignores SIGQUIT and records SIGINT in `pending` instead of
    letting it end the process.
  - `consume_sigint()` returns `True` once for each recorded SIGINT.
  - `restore()` puts back the previous handlers.
  - Used as a context manager, it installs on entry and restores on exit.

### `minishell_core.errors`

- `ShellError(func_name, message)` is the exception raised by these modules.
- `builtin_error_message(func, name, err)` formats messages such as
  ``minishell: export: `1A': not a valid identifier``.
- `builtin_error(...)` writes such a message to standard error.

## Installation

```
pip install .
```

To install with the test extra:

```
pip install ".[test]"
```

## Example

```python
from minishell_core.tokens import NodeKind, Token
from minishell_core.parser import parse_cmd
from minishell_core.envmap import init_env

tokens = [
    Token("echo", NodeKind.CMD),
    Token("hello", NodeKind.CMD),
    Token("|", NodeKind.PIPE),
    Token("cat", NodeKind.CMD),
]
tree = parse_cmd(tokens)
assert tree.kind is NodeKind.PIPE
assert tree.left.cmds == ["echo", "hello"]
assert tree.right.cmds == ["cat"]

env = init_env(["HOME=/home/user", "PATH=/usr/bin"], cwd="/tmp")
env.set("NEW_VAR", "new_value")
assert env.get("NEW_VAR") == "new_value"
env.unset("NEW_VAR")
print(env.environ())
# ['OLDPWD=/home/user/Downloads', 'PWD=/tmp', 'SHLVL=1',
#  'PATH=/usr/bin', 'HOME=/home/user']
```

## What this package does not do

This package has no interactive prompt and no command to run. It does not
split a raw command line into tokens. You build the `Token` list yourself,
for example with the help of `fetch_first_operator` and the character checks.

It also does not:

- expand variables or remove quotes;
- run commands, pipelines or redirections;
- provide builtins such as `cd`, `echo` or `export`.

It provides the tokens, the parse tree, the environment map and the signal
handling that such a shell would be built on.