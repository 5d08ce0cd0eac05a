"""Exceptions raised by the command-dispatch layer."""

from __future__ import annotations


class ToolError(RuntimeError):
    """Base class for dispatcher failures. Failures raised by a tool's own run() are never wrapped in it."""


class OptionParseError(ToolError):
    """Malformed global options (`-D`, `-I`) given to a parsed-option tool."""


class CommandNotFoundError(ToolError):
    """Neither a registered tool nor a loadable fallback target matched the command."""


class FallbackInvocationError(ToolError):
    """The `main` entry point of a fallback target raised."""


class ConfigurationError(ToolError):
    """An explicitly requested configuration file could not be read."""
