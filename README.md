# minishell

A small shell front end. It reads a command line and splits it into words.
Whitespace and operators inside single or double quotes do not split words.
It recognises the operators `<`, `>`, `<<`, `>>` and `|`. From the words it
builds a pipeline of commands, each with its name, its arguments and its
redirections. Syntax errors are reported on standard error. These are a pipe
at either end of the line, or a redirection with no word after it.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running the prompt

    minishell

At the `minishell>` prompt, type a command line. For each line, the prompt
prints what it parsed:

- a `command=<name>` line for every command in the pipeline;
- its `args=<word>` lines;
- its `file=<target> id=<n>` lines, one per redirection.

The first command's name is also printed once before the list. A command
with no name shows as `(null)`. The redirection ids are 1 for `<`, 2 for `>`,
3 for `<<` and 4 for `>>`.

A line that starts with `exit` ends the session, and so does end of input.

    minishell>cat < in.txt | grep foo >> out.txt

## Using it as a library

    from minishell.parser import parse
    from minishell.cli import render

    commands = parse("ls -l | wc -l > count.txt")
    print(render(commands), end="")

`parse` returns a list of `minishell.models.Command` objects. Each one has:

- `name`: the command name;
- `args`: the command's words, which include its name;
- `redirections`: a list of `Redirection` objects, each with a `kind`, a
  `TokenType`, and a `file`.

On a malformed line, `parse` raises `minishell.models.ParseError`. Its
`errors` attribute holds the `ErrorKind` values. To write them out the way
the prompt does, use `minishell.parser.report_errors`.
`minishell.parser.error_message` gives the text for a single kind.
`minishell.parser.parse_tokens` parses tokens you have already classified.

The lower layers can be used on their own:

- `minishell.lexer`:
  - `lex` splits a line into words.
  - `classify` turns the words into `Token` objects tagged with a `TokenType`.
  - `split_unquoted` and `pad_operators` are the steps `lex` is built from.
  - `is_quoted` tells whether a character lies inside a closed quote pair.
  - `remove_quotes` and `strip_quotes` remove the first pair of matching
    quotes from a word or from each token. They raise `ParseError` when that
    quote is never closed.
- `minishell.environment.EnvStore` holds `KEY=VALUE` entries in insertion
  order. It has `add`, `get` and `remove`, and supports iteration and `len`.
  Iteration yields `EnvVar` objects. `parse_entry` splits a single entry.
- `minishell.expand`:
  - `expand_word` replaces each `$NAME` reference in a word with its value
    from an `EnvStore`. A name with no value becomes an empty string.
  - `expand_tokens` does the same for every word token.
- `minishell.builtins` provides `echo`, `env`, `pwd` and `unset`. Each one
  writes to the streams it is given. `is_builtin` tells whether an argument
  list names one of `echo`, `cd`, `pwd`, `exit`, `unset` or `env`.

## What it does not do

The package parses command lines. It does not run them:

- The prompt does not start programs.
- The prompt does not run the builtins.
- The prompt does not open redirection files.
- The prompt does not connect pipes.

`parse` does not expand variables or remove quotes. Those steps are separate
functions that you call yourself. There is no `cd` or `export` builtin.