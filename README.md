# jsonconftool

A small command-line tool, `jct`, for reading and editing JSON configuration
files. Keys are addressed with dot notation: `server.host` walks into the
`server` object, and a numeric part such as `servers.0.name` indexes into an
array. Empty parts are ignored, so `a..b` is the same as `a.b`.

## Installation

```
pip install .
```

This installs the `jct` command. The same entry point can also be run as
`python -m jsonconftool.cli`.

## Usage

```
jct <config_file> <command> [options]
```

| Command              | What it does                                   |
|----------------------|------------------------------------------------|
| `get <key>`          | Print the value stored under `key`             |
| `set <key> <value>`  | Store `value` under `key` and save the file    |
| `create`             | Create a new file holding an empty object      |
| `print`              | Print the whole file                           |
| `--help`, `-h`       | Show the usage text                            |

Examples:

```
jct new_config.json create
jct config.json set server.host localhost
jct config.json set server.port 8080
jct config.json set features.0 true
jct config.json get server.port
jct config.json print
```

### How values are interpreted by `set`

- `true` and `false` become booleans, `null` becomes null.
- Text that reads completely as a number becomes a number. Besides ordinary
  decimals and exponents this includes hexadecimal forms such as `0x1A`,
  and `inf`/`nan`; leading whitespace is allowed.
- Everything else, including the empty string, is stored as a string.

Missing intermediate objects are created along the way. When a path steps
into an array, the array is extended with empty objects (for intermediate
parts) or nulls (for the last part) so that the given index exists. Setting
a key below a string, number, boolean or null fails.

### Output

Numbers are held as floats; a whole number in the 64-bit integer range is
shown without a fractional part (`8080`), anything else in `%g` style.

Scalars printed by `get` appear bare (strings without quotes). Objects and
arrays are printed with two-space indentation and object keys sorted
alphabetically. Saved files use the same layout, end with a newline, and
escape quotes, backslashes and control characters inside string values.

### Exit status and errors

`get` and `print` exit with status 1 if the file cannot be opened or the key
is not found. An empty file, or one whose contents do not parse, is treated
as an empty object rather than an error. `set` on a file that cannot be
loaded starts from an empty object. `create` refuses to overwrite an
existing file. Unknown commands and missing arguments print the usage text
and exit with status 1.

## Limitations

- Escape sequences inside strings are not decoded when a file is read; the
  text between the quotes is kept as written, and is escaped again when the
  file is saved.
- `set` only stores scalars; there is no command to store an object or
  array literal, and none to delete a key.
- Files larger than 100 MB are rejected.

## Using it from Python

```python
from jsonconftool.config import (
    format_item,
    get_nested_item,
    load_config,
    save_config,
    set_nested_item,
)

config = load_config("config.json")
set_nested_item(config, "server.port", "8080")
print(format_item(get_nested_item(config, "server.port")))  # 8080
save_config("config.json", config)
```

Documents are plain Python values (`dict`, `list`, `str`, `float`, `bool`,
`None`). Other pieces:

- `jsonconftool.parser.parse_json_string` / `parse_json_file` read JSON
  text; malformed text raises `JsonParseError`.
- `jsonconftool.config.dump_config` returns the text `save_config` writes;
  `parse_scalar` applies the `set` value rules; `print_item` prints what
  `format_item` returns.
- `jsonconftool.serializer.json_to_string(value, pretty)` produces compact
  or indented JSON without sorting keys (most recently added member first).
- `jsonconftool.values.JsonType` and `type_of` classify values;
  `JsonConfigError` is the base error. `get_nested_item` raises `KeyError`
  for a missing key.

## Running the tests

```
pip install .[test]
pytest
```