# promptsh

A small command shell. It reads one command per line and splits the line
on whitespace. The first word is either run as a builtin or looked up on
`PATH` and started as a child process.

## Installing

```
pip install .
```

## Running

```
promptsh
```

When standard input is a terminal, the shell shows the prompt `==> `.
After a failed command or a blank line it keeps going. Ctrl-C prints a
fresh prompt and does not leave the shell.

When input is piped in, no prompt is shown. The shell runs the commands
in order and stops at the first error, at a blank line, or at the end of
input:

```
printf 'setenv GREETING hello\nenv\nexit 3\n' | promptsh
```

## Command names

- A name starting with `./` is joined to the value of `PWD`.
- A name starting with `/` is used as it is.
- Any other name is tried in each `PATH` directory in turn. The first path
  that exists is used. If none exists, the name is used as given.

## Builtins

| Command | What it does |
| --- | --- |
| `cd [dir]` | Change directory. With no argument, `~` or `--`, it goes to `$HOME`. `-` goes back to `$OLDPWD`. `.` stays put, and `..` moves to the parent of the current directory. A relative `dir` is taken from `$PWD`. `PWD` and `OLDPWD` are updated after the change. |
| `env` | Print the environment, one `NAME=value` per line. |
| `setenv NAME VALUE` | Add a variable or replace it. `setenv NAME` on its own removes the variable. |
| `unsetenv NAME` | Remove a variable. |
| `help [name]` | Show help for all builtins, or for one of `cd`, `env`, `setenv`, `unsetenv`, `help` and `exit`. |
| `exit [n]` | Leave the shell with status `n` modulo 256. With no argument, the status is 0. If the argument is `0` or is not a number, the shell reports `Illegal number` and does not exit. |

On start-up, `SHLVL` is raised by one. A missing or malformed `SHLVL` is
treated as 0.

## Errors and exit status

Errors go to standard error in this form:

```
promptsh: 3: nosuchcmd: No such file or directory
```

The first field is the name the shell was started under, the second is
the line number, and the third is the command.

| Code | Cause | Message |
| --- | --- | --- |
| 127 | The file is missing or is a directory | `No such file or directory` when the path does not exist, otherwise `Command not found` |
| 126 | The file is not executable | `Permission denied` (`Is a directory` for a directory) |
| 2 | `cd` could not change directory | `No such file or directory` |
| 2 | `exit` was given a bad number | `Illegal number: ARG` |
| -1 | `setenv` or `unsetenv` was given no name | `Unable to add/remove from environment` |

The shell exits with the code of the last reported error, with the number
passed to `exit`, or with 0. Every exit status is reduced modulo 256, so
-1 becomes 255. The exit status of a program the shell started is not
recorded; a program that ran counts as success.

## Using it from Python

```python
import io
from promptsh.shell import Shell

err = io.StringIO()
shell = Shell("promptsh", {"PATH": "/bin:/usr/bin"}, io.StringIO("setenv GREETING hello\n"), io.StringIO(), err)
status = shell.run()
shell.state.env.get("GREETING")   # "hello"
```

Output from child programs goes to the `stdout` and `stderr` given to
`Shell`, and so do error messages. The builtins `env` and `help` write to
the process's own `sys.stdout` and `sys.stderr`.

Other parts you can use directly:

- `promptsh.environment.Environment` holds the shell's ordered list of
  `NAME=value` entries.
- `promptsh.resolve.resolve_command` finds the file that a command name
  refers to.
- `promptsh.errors.error_message` builds the text for an error code.

## What it does not do

The shell runs one simple command per line. It has no pipes, no
redirection, no quoting or escaping, no variable or `~` expansion in
arguments, no `;`, `&&` or `||`, no comments, no aliases, no history and
no script-file argument. Input is only read from standard input.