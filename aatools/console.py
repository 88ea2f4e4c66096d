"""Coloured console messages: bullets, steps, successes, warnings and errors."""

from __future__ import annotations

import sys

RESET = "\033[0m"
BOLD = "\033[1m"
BOLD_RED = "\033[1;31m"
BOLD_GREEN = "\033[1;32m"
BOLD_YELLOW = "\033[1;33m"

BULLET_TEXT = BOLD + " ⋅ " + RESET
FATAL_TEXT = BOLD_RED + " ✗ Error: " + RESET
ERROR_TEXT = BOLD_RED + " ✗ " + RESET
SUCCESS_TEXT = BOLD_GREEN + " ✓ " + RESET
WARNING_TEXT = BOLD_YELLOW + " ‼ " + RESET

# Prefix written before every formatted message.
INDENT = ""


def _format(msg: str, args: tuple) -> str:
    return msg % args if args else msg


def _write(text: str, stream=None) -> int:
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text.encode("utf-8"))


def echo(msg: str, *args) -> int:
    """Print a %-formatted message; return the number of bytes written."""
    return _write(_format(msg, args))


def echoln(msg: str) -> int:
    """Print a message followed by a newline; return the bytes written."""
    return _write(f"{msg}\n")


def bulletf(msg: str, *args) -> str:
    """Return a formatted bullet point line."""
    return f"{INDENT}{BULLET_TEXT}{_format(msg, args)}\n"


def bullet(msg: str, *args) -> int:
    """Print a bullet point line."""
    return _write(bulletf(msg, *args))


def stepf(msg: str, *args) -> str:
    """Return a formatted step title line."""
    return f"{INDENT}{BOLD_GREEN}{_format(msg, args)}{RESET}\n"


def step(msg: str, *args) -> int:
    """Print a step title line."""
    return _write(stepf(msg, *args))


def successf(msg: str, *args) -> str:
    """Return a formatted success line."""
    return f"{INDENT}{SUCCESS_TEXT}{_format(msg, args)}\n"


def success(msg: str, *args) -> int:
    """Print a success line."""
    return _write(successf(msg, *args))


def warningf(msg: str, *args) -> str:
    """Return a formatted warning line."""
    return f"{INDENT}{WARNING_TEXT}{_format(msg, args)}\n"


def warning(msg: str, *args) -> int:
    """Print a warning line."""
    return _write(warningf(msg, *args))


def error(msg: str, *args) -> int:
    """Print an error line to standard output."""
    return _write(f"{INDENT}{ERROR_TEXT}{_format(msg, args)}\n")


def fatalf(msg: str, *args) -> str:
    """Return a formatted fatal error line."""
    return f"{INDENT}{FATAL_TEXT}{_format(msg, args)}\n"


def fatal(msg: str, *args) -> None:
    """Write a fatal error to standard error and exit with status 1."""
    _write(fatalf(msg, *args), sys.stderr)
    raise SystemExit(1)