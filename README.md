# minishell

A minimal interactive shell. It reads a line at a prompt, splits it on
commas into a command and its arguments, looks the command up on your
`PATH` and runs it, waiting for it to finish before prompting again.
The package also holds the building blocks around it: token types for
a command-line lexer, signal handling, string helpers and a small
`printf`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the shell

```
minishell
```

At the `minishell> ` prompt, type a command and its arguments separated by
commas, for example `ls,-l,/tmp`. Empty pieces between commas are dropped.
Typing exactly `exit`, or ending input with Ctrl+D, leaves the shell with
status 0.

For each command the shell:

1. tries each directory of `PATH` in turn and prints the first
   `directory/command` that exists, or `<command>: command not found`;
2. runs the program it found with the given arguments and an empty
   environment, waits for it, then prints `Child finished`.

Line editing is available when Python's `readline` module is.

## What it does not do

The prompt loop does no lexing: it does not use the token types below to
read its input. There is no quoting, no variable expansion, no pipes, no
redirections or here-documents, no built-in commands other than `exit`,
and no command history. The prompt loop does not install the signal
handlers from `minishell.signals`; call `init_signals()` yourself if you
build your own loop.

## Using the library

- `minishell.execute`
  - `get_path(cmd, search_path=None)`: the first `dir/cmd` that exists among
    the colon-separated directories of `search_path` (default: `PATH`),
    printing it; prints a "command not found" message and returns `None`
    otherwise.
  - `execute(args, path)`: runs `path` with `args` in an empty environment,
    prints `Child finished` and returns the exit status, or `None` if the
    program could not be started.
  - `main(argv=None)`: the prompt loop described above.
- `minishell.tokens`
  - `TokenType`: `WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `APPEND`, `HEREDOC`.
  - `Token`: a dataclass with `value`, `kind` and `expand`.
  - `make_token(value, kind, expand)`: builds a token; `kind` may be a
    `TokenType` or its integer value. A value starting with `'` is never
    expanded; a `None` value raises `ValueError`.
  - `format_tokens(tokens)` / `print_tokens(tokens, file=None)`: a listing
    with one token per line, such as `[PIPE]      :\t|, 1`.
- `minishell.signals`
  - `init_signals()`: installs `handle_sigint` for SIGINT and ignores SIGQUIT.
  - `handle_sigint(signum, frame)`: writes a newline and records status 130.
  - `exit_status()`: the status last recorded by the handler (0 at start).
- `minishell.text`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `strlcpy`, `strlcat` and
  `strmapi`. Searches return an index or `None`; `strlcpy` and `strlcat`
  return the resulting text together with the length that a full copy
  would have had.
- `minishell.chars`: tests on integer character codes (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`) and ASCII case mapping
  (`toupper`, `tolower`).
- `minishell.printf`: `format_string(template, *args)` and
  `printf(template, *args, file=None)` for `%d %i %u %c %s %p %x %X %%`.
  Unknown conversions print nothing; `%s` of `None` gives `(null)` and
  `%p` of `None` or 0 gives `(nil)`. `printf` returns the number of
  characters written.

```python
from minishell.text import split, atoi
from minishell.printf import format_string
from minishell.tokens import TokenType, make_token, format_tokens

split("ls,-l,/tmp", ",")             # ['ls', '-l', '/tmp']
atoi("  -42abc")                     # -42
format_string("%s is %x", "n", 255)  # 'n is ff'
format_tokens([make_token("'$HOME'", TokenType.WORD, True)])
# "[WORD]      :\t'$HOME', 0\n"
```