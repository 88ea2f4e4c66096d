# aatools

Building blocks for system administration tools on Linux. It covers coloured console messages, a path object with lexical and filesystem helpers, filtered directory listings, file and tree copying, and external commands run in their own process group. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `aatools.console`

These functions print coloured status lines to standard output. Each one returns the number of bytes it wrote. Messages use `%`-style formatting.

- `echo(msg, *args)` and `echoln(msg)` print plain text.
- `bullet`, `step`, `success`, `warning` and `error` print prefixed lines.
- `bulletf`, `stepf`, `successf`, `warningf` and `fatalf` return the same lines as strings and print nothing.
- `fatal(msg, *args)` writes the message to standard error and raises `SystemExit(1)`.
- The module-level `INDENT` string is put in front of every formatted line.

```python
from aatools import console

console.step("Building profiles")
console.bullet("%d profiles found", 42)
console.success("done")
```

### `aatools.paths`

`Path` wraps a path string. It offers these groups of operations:

- **Lexical:** `join`, `join_path`, `clean`, `base`, `ext`, `parent`, `parents`, `rel_to`, `rel_from`, `is_inside_dir`, `has_prefix`, `has_suffix`, `abs`, `to_abs`, `is_abs`, `equals_to`, `equivalent_to`.
- **File-system queries:** `stat`, `lstat`, `exists`, `not_exists`, `exist_check`, `is_dir`, `is_not_dir`, `is_dir_check`, `canonical`, `follow_symlink`.
- **File I/O:** `read_file`, `read_text`, `read_lines`, `write_file`, `truncate`, `open`, `create`, `append`.
- **Changes:** `mkdir`, `mkdir_all`, `remove`, `remove_all`, `rename`, `chmod`, `chtimes`.
- **Listings:** `read_dir(*filters)`, `read_dir_recursive()` and `read_dir_recursive_filtered(recursion_filter, *filters)`. Entries come back sorted by name.

A recursive listing that walks into a directory symlink loop raises `SymlinkLoopError`.

`new_path(*parts)` builds a path from its parts. It returns `None` when given nothing or a single empty string.

```python
from aatools.paths import new_path
from aatools.filters import filter_out_directories, filter_suffixes

etc = new_path("/etc", "apparmor.d")
for path in etc.read_dir(filter_out_directories(), filter_suffixes(".conf")):
    print(path.base())
```

### `aatools.filters`

These are predicates for directory listings:

- `filter_directories()` and `filter_out_directories()`.
- `filter_names(*names)` and `filter_out_names(*names)`, matched against the base name.
- `filter_prefixes(*prefixes)` and `filter_out_prefixes(*prefixes)`, matched against the base name.
- `filter_suffixes(*suffixes)` and `filter_out_suffixes(*suffixes)`, matched against the full path.
- `or_filter`, `and_filter` and `not_filter` combine other filters.

### `aatools.pathlist`

`PathList` is a `list` of `Path` objects with helpers that change the list in place:

- **Filtering:** `filter`, `filter_dirs`, `filter_out_dirs`, `filter_out_hidden_files`, `filter_prefix`, `filter_out_prefix`, `filter_suffix`, `filter_out_suffix`.
- **Adding:** `add_if_missing` and `add_all_missing`.
- **Lookup:** `contains` and `contains_equivalent_to`.
- **Other:** `to_abs`, `sort_paths`, `clone`, `as_strings`.

`new_path_list(*strings)` builds one from path strings.

```python
from aatools.pathlist import new_path_list

paths = new_path_list("b.txt", ".hidden", "a.txt")
paths.filter_out_hidden_files()
paths.sort_paths()
print(paths.as_strings())  # ['a.txt', 'b.txt']
```

### `aatools.fileio`

- `copy_file(src, dst)` copies the contents and permission bits of a file. It raises `shutil.SameFileError` when the two paths are equal.
- `copy_tree(src, dst)` copies every file under `src` into `dst` and skips `README.md` files.
- `copy_dir(src, dst)` copies a directory recursively. `dst` must not exist yet, and symbolic links are skipped.
- `copy_fs(src, dst)` copies a tree into `dst` and creates it if needed. It raises an error when a destination file already exists or when the source contains a symbolic link.
- `temp_dir()` returns the temporary directory.
- `mk_temp_dir(directory, prefix)` creates a temporary directory.
- `mk_temp_file(directory, prefix)` creates a temporary file and keeps it after closing.
- `write_to_temp_file(data, directory, prefix)` writes data to a new temporary file and returns its path.
- `null_path()` returns the null device.
- `getwd()` returns the current directory.

### `aatools.process`

`Process` runs an external command in a new process group. Its standard input is the null device by default. You can:

- redirect its output to files or writable objects with `redirect_stdout_to` and `redirect_stderr_to`;
- request pipes with `use_stdin_pipe`, `use_stdout_pipe` and `use_stderr_pipe`, then read the `stdin`, `stdout` and `stderr` properties;
- replace its environment with `set_environment`;
- set its working directory with `directory` or `set_dir_from_path`.

To run it, call `start` and `wait`, or `run`. A non-zero exit raises `subprocess.CalledProcessError`.

To stop it:

- `kill` sends `SIGKILL` to the whole process group.
- `signal` sends any signal to the process itself.

`run_within_context(cancel)` kills the process if the `threading.Event` it is given gets set before the process exits. `run_and_capture_output(cancel)` does the same and returns `(stdout, stderr)` as bytes.

```python
from aatools.process import new_process

proc = new_process(["LC_ALL=C"], "uname", "-r")
out, err = proc.run_and_capture_output(None)
print(out.decode().strip())
```

## What this package does not do

The package has no command-line program. It does not read or parse AppArmor audit or journal logs. It does not check, sort or merge AppArmor rule values, and it does not render profiles. It provides only the console, path, listing, copying and process helpers described above.