"""Resolve optional hooks by dotted path without failing when they are absent.

A simulation often calls into facilities that only exist in some launch
configurations (a debug overlay, an instrumentation module). graceful_bind()
looks such a method up by path and returns it bound to its owner, or None
if the owner does not exist, so callers can write::

    show_popup = graceful_bind("sim.display.show_popup", namespace=runtime)
    if show_popup:
        show_popup(dialog)
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any, Callable

_MISSING = object()


def _lookup(container: Any, term: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(term, _MISSING)
    return getattr(container, term, _MISSING)


def graceful_bind(path: str, namespace: Any = None) -> Callable | None:
    """Return the method at ``path`` bound to its container, or None.

    Args:
        path: Dot-separated path ending in the method name, for example
            ``"sim.display.show_popup"``. Needs at least two terms.
        namespace: Object or mapping the path is resolved against. When
            None, the first term is looked up in ``sys.modules``; modules
            are never imported as a side effect.

    Returns:
        The bound method, or None if any container along the path is
        missing or None.

    Raises:
        ValueError: If ``path`` has fewer than two terms or surrounding
            whitespace.
        AttributeError: If the container exists but has no such method.
    """
    if path.strip() != path:
        raise ValueError(f"path must be trimmed: {path!r}")
    terms = path.split(".")
    if len(terms) < 2:
        raise ValueError(f"path must have multiple parts: {path!r}")

    *container_terms, method = terms
    if namespace is None:
        namespace = sys.modules

    container = namespace
    for term in container_terms:
        container = _lookup(container, term)
        if container is _MISSING or container is None:
            return None

    return getattr(container, method)
