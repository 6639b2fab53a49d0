"""Operator tokens, a command-tree parser, an environment map and SIGINT handling for a small shell."""

__version__ = "0.1.0"
__all__ = ["errors", "tokens", "signals", "envmap", "parser"]