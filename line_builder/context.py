"""Construction context: output mode, settings and helper-value lookup."""

from __future__ import annotations

import inspect
import re
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from line_builder.config import BuilderSettings

_SNAKE_RE = re.compile(r"_([a-z0-9])")


class Mode(str, Enum):
    STANDARD = "api"
    ALTERNATE = "sdkv2"


def camelize(name: str) -> str:
    """``padding_all`` -> ``paddingAll``."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


def snake_case(name: str) -> str:
    """Field names are declared in snake_case already."""
    return name


KeyFn = Callable[[str], str]

_KEY_FUNCTIONS: dict[Mode, KeyFn] = {
    Mode.STANDARD: camelize,
    Mode.ALTERNATE: snake_case,
}


class Context:
    """Wraps the caller's opaque context object.

    The mode is fixed when the context is created and shared by every node
    built under it. ``source`` is only consulted through :meth:`has` and
    :meth:`resolve`; it may be a mapping, an object with its own
    ``resolve(name)`` method, or any object with public attributes.
    """

    def __init__(
        self,
        source: Any = None,
        mode: Mode | str = Mode.STANDARD,
        settings: BuilderSettings | None = None,
    ) -> None:
        if isinstance(source, Context):
            raise TypeError("source must be a user object, not a Context")
        self._source = source
        self._mode = Mode(mode)
        self._settings = settings

    @property
    def source(self) -> Any:
        return self._source

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def alternate(self) -> bool:
        return self._mode is Mode.ALTERNATE

    @property
    def settings(self) -> BuilderSettings:
        if self._settings is None:
            from line_builder.config import get_settings

            self._settings = get_settings()
        return self._settings

    def key(self, name: str) -> str:
        return _KEY_FUNCTIONS[self._mode](name)

    def has(self, name: str) -> bool:
        source = self._source
        if source is None:
            return False
        if isinstance(source, Mapping):
            return name in source
        if callable(getattr(source, "resolve", None)):
            return source.resolve(name) is not None
        return not name.startswith("_") and hasattr(source, name)

    def resolve(self, name: str) -> Any:
        if not self.has(name):
            raise KeyError(name)
        source = self._source
        if isinstance(source, Mapping):
            return source[name]
        if callable(getattr(source, "resolve", None)):
            return source.resolve(name)
        value = getattr(source, name)
        return value() if inspect.ismethod(value) else value


def ensure_context(context: Context | Any = None) -> Context:
    """Return ``context`` if it is already a Context, else wrap it."""
    if isinstance(context, Context):
        return context
    return Context(context)
