"""
Variation context and its accessors.

The variation context carries the culture and segment of the current request.
It is read through an accessor so callers decide how it is scoped: a fixed
accessor for tests and batch jobs, or a context-variable accessor giving every
request or task its own value.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Protocol

from attrs import frozen


@frozen
class VariationContext:
    """Active culture and segment of a logical request."""

    culture: str | None = None
    segment: str | None = None


class VariationContextAccessor(Protocol):
    """Read-only access to the current variation context."""

    @property
    def variation_context(self) -> VariationContext | None: ...


class FixedVariationContextAccessor:
    """Accessor returning the same context on every read."""

    def __init__(self, context: VariationContext | None = None):
        self._context = context

    @property
    def variation_context(self) -> VariationContext | None:
        return self._context


_current_variation_context: ContextVar[VariationContext | None] = ContextVar(
    "contenttree_variation_context", default=None
)


class ContextVarVariationContextAccessor:
    """Accessor backed by a context variable, isolated per thread and task."""

    @property
    def variation_context(self) -> VariationContext | None:
        return _current_variation_context.get()

    def set(self, context: VariationContext | None) -> Token:
        """Set the context for the current execution context."""
        return _current_variation_context.set(context)

    def reset(self, token: Token) -> None:
        """Restore the context that was active before ``set``."""
        _current_variation_context.reset(token)

    @contextmanager
    def scoped(self, context: VariationContext | None) -> Iterator[VariationContext | None]:
        """
        Make ``context`` current for the duration of a with-block.

        Params:
            context: Context to activate

        Yields:
            The activated context
        """
        token = self.set(context)
        try:
            yield context
        finally:
            self.reset(token)
