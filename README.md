# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file. It works like this shell
line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

- The command needs exactly four arguments. With any other number it prints
  `Incorrect number of arguments` on standard error and exits with status 1.
- Each command string is split on spaces, and empty pieces are dropped.
  Quotes are not interpreted.
- A command name that contains `/` is used as a path as it stands. Any other
  name is looked up in the directories listed in `PATH`. If a match exists but
  is not executable, the lookup stops with a permission error. If the name is
  not found, or `PATH` is not set, a message is printed on standard error and
  that command is not run.
- The output file is opened for writing, created with mode `0644` (the umask
  still applies) and truncated. If the input file cannot be opened, the first
  command is not run, but the second command still runs.
- The exit status is that of the second command. It is 1 when the second
  command could not be started or did not exit normally.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The same pipeline can be run from Python:

```python
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`run_pipeline` uses `os.environ` when no environment mapping is given.

## What it does not do

`pipex` handles exactly two commands. It has no way to chain more than two,
no here-document input mode, no append mode for the output file, and no shell
quoting or expansion in command strings.

## Library

The package also contains small helpers that can be imported on their own.

- `pipex.command`
  - `resolve_command(command_line, env)` returns a `CommandData` with `path`
    and `args`.
  - `search_paths(env)` and `find_executable(name, paths)` do the lookup.
  - A failed lookup raises `CommandError`. Its `code` is
    `PERMISSION_DENIED` or `CMD_NOTFOUND`.
- `pipex.textutils`
  - `is_space`, `split_words`, `trim` and `substring`.
  - `find_within`: search only within the first `limit` characters.
  - `compare_prefix`: compare only the first `count` characters.
  - `bounded_copy` and `bounded_concat`: return the resulting text together
    with the length the full result would have had.
- `pipex.numbers`
  - `parse_int`: wraps results to 32 bits.
  - `parse_int_bounded`: raises `IntRangeError` when the value falls outside
    32 bits. The exception's `value` holds the clamped limit.
  - `parse_decimal`: raises `DecimalFormatError` on badly formed input.
  - `format_int`, `mod` (the result takes the sign of the divisor) and `lerp`.
- `pipex.sorting`
  - `insertion_sort(items)`: sorts in place and is stable.
  - `quicksort(items, low=0, high=None)`: sorts `items[low:high + 1]` in
    place.
- `pipex.lines`
  - `LineReader(stream, buffer_size=1024)` reads text or binary streams.
    `read_line()` returns one line at a time with its newline kept, and
    returns `None` at the end of the stream. The reader can also be iterated.
- `pipex.printf`
  - `format_printf(template, *args)` handles `%c %s %d %i %u %x %X %p %%`.
    An unknown conversion is kept as written. A lone `%` at the end raises
    `ValueError`.
  - `printf` writes the result to standard output and returns its length.
  - `format_unsigned`, `format_hex` and `format_pointer` are available on
    their own.

```python
from pipex.command import resolve_command

cmd = resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})
print(cmd.path, cmd.args)
```