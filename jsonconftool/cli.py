"""Command-line entry point: get, set, create and print configuration values."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .config import load_config, print_item, save_config, set_nested_item, get_nested_item
from .values import JsonConfigError

_USAGE = """\
Usage: jct <config_file> <command> [options]

Commands:
  <config_file> get <key>              Get a value from the config file
  <config_file> set <key> <value>      Set a value in the config file
  <config_file> create                 Create a new empty config file
  <config_file> print                  Print the entire config file

Examples:
  jct config.json get server.host       Get the server host from config.json
  jct config.json set server.port 8080  Set the server port to 8080 in config.json
  jct new_config.json create            Create a new empty config file
  jct config.json print                 Print the entire config file
"""


def usage() -> str:
    """Return the usage text shown for bad arguments and ``--help``."""
    return _USAGE


def _print_usage() -> None:
    print(usage(), end="")


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _handle_get(config_file: str, key: str) -> int:
    try:
        config = load_config(config_file)
    except JsonConfigError as exc:
        _error(str(exc))
        _error(f"Failed to load config file '{config_file}'.")
        return 1
    try:
        value = get_nested_item(config, key)
    except KeyError:
        _error(f"Key '{key}' not found in config file.")
        return 1
    print_item(value)
    return 0


def _handle_set(config_file: str, key: str, value_str: str) -> int:
    try:
        config = load_config(config_file)
    except JsonConfigError:
        config = {}
    try:
        set_nested_item(config, key, value_str)
    except (JsonConfigError, TypeError) as exc:
        _error(str(exc))
        _error(f"Failed to set key '{key}' in config file.")
        return 1
    try:
        save_config(config_file, config)
    except JsonConfigError as exc:
        _error(str(exc))
        _error(f"Failed to save config file '{config_file}'.")
        return 1
    print(f"Successfully set '{key}' to '{value_str}' in '{config_file}'.")
    return 0


def _handle_create(config_file: str) -> int:
    if os.path.exists(config_file):
        _error(f"Config file '{config_file}' already exists.")
        return 1
    try:
        save_config(config_file, {})
    except JsonConfigError as exc:
        _error(str(exc))
        _error(f"Failed to save config file '{config_file}'.")
        return 1
    print(f"Successfully created new config file '{config_file}'.")
    return 0


def _handle_print(config_file: str) -> int:
    try:
        config = load_config(config_file)
    except JsonConfigError as exc:
        _error(str(exc))
        _error(f"Failed to load config file '{config_file}'.")
        return 1
    print_item(config)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        _print_usage()
        return 1

    config_file, command, *rest = args

    if command == "get":
        if len(rest) < 1:
            _error("'get' command requires a key.")
            _print_usage()
            return 1
        return _handle_get(config_file, rest[0])
    if command == "set":
        if len(rest) < 2:
            _error("'set' command requires a key and a value.")
            _print_usage()
            return 1
        return _handle_set(config_file, rest[0], rest[1])
    if command == "create":
        return _handle_create(config_file)
    if command == "print":
        return _handle_print(config_file)
    if command in ("--help", "-h"):
        _print_usage()
        return 0
    _error(f"Unknown command '{command}'.")
    _print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main())