"""Invoking arbitrary Python objects by name when no registered tool matches.

A fallback target is located by its dotted name. A Tool subclass is run like any
registered tool; anything else must expose a ``main(args)`` callable, such as a
static method on a class or a module-level function."""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import TYPE_CHECKING

from .errors import CommandNotFoundError, FallbackInvocationError
from .tool import Tool, run

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .main import Context

LOGGER = logging.getLogger(__name__)

DEFAULT_PACKAGE = "toolcli"


def locate(name: str) -> object:
    """Resolve ``module:Attr``, ``module.Attr`` or ``module`` to the object it names.

    Names that do not resolve as given are retried relative to the toolcli package."""
    try:
        return _locate(name)
    except (ImportError, AttributeError, ValueError) as e:
        if name.startswith(f"{DEFAULT_PACKAGE}."):
            raise CommandNotFoundError(f"Cannot locate {name!r}: {e}") from e
        try:
            return _locate(f"{DEFAULT_PACKAGE}.{name}")
        except (ImportError, AttributeError, ValueError):
            raise CommandNotFoundError(f"Cannot locate {name!r}: {e}") from e


def _locate(name: str) -> object:
    if not name or name.startswith("."):
        raise ValueError(f"not an absolute name: {name!r}")

    if ":" in name:
        module_name, _, qualname = name.partition(":")
        return _getattr_path(importlib.import_module(module_name), qualname)

    parts = name.split(".")
    # longest importable module prefix, the rest are attributes
    for i in range(len(parts), 0, -1):
        module_name = ".".join(parts[:i])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if e.name is not None and not (module_name == e.name or module_name.startswith(f"{e.name}.")):
                # the module exists but one of its own imports is missing
                raise
            continue
        return _getattr_path(module, ".".join(parts[i:]))
    raise ModuleNotFoundError(f"No module named {parts[0]!r}", name=parts[0])


def _getattr_path(obj: object, qualname: str) -> object:
    for attr in filter(None, qualname.split(".")):
        obj = getattr(obj, attr)
    return obj


def invoke(target: object, args: Sequence[str], context: Context | None = None) -> int:
    """Run a located fallback target with the remaining command-line arguments."""
    if inspect.isclass(target) and issubclass(target, Tool):
        if inspect.isabstract(target):
            raise CommandNotFoundError(f"{_describe(target)} is an abstract tool and cannot be run")
        LOGGER.debug("fallback target %r is a tool", target)
        return run(target, args, context)

    entry_point = getattr(target, "main", None)
    if not callable(entry_point):
        raise CommandNotFoundError(f"{_describe(target)} is neither a tool nor has a main() entry point")

    LOGGER.debug("invoking %s.main with %s", _describe(target), list(args))
    try:
        status = entry_point(list(args))
    except SystemExit as e:
        status = e.code
    except Exception as e:
        raise FallbackInvocationError(f"{_describe(target)}.main failed: {e}") from e

    if status is None:
        return 0
    if isinstance(status, int):
        return status
    # SystemExit("message") convention
    LOGGER.error("%s", status)
    return 1


def _describe(target: object) -> str:
    return getattr(target, "__qualname__", None) or getattr(target, "__name__", None) or repr(target)
