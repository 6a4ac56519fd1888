"""Allocation of collision-free CSS class names for decoration templates.

Every template that ships a stylesheet scopes its rules to class names drawn
from a :class:`ClassNameAllocator`. The allocator pairs a caller-supplied key
with a monotonically increasing counter, so two templates built from the same
builder never share a class, even across several content views in one process.

A process-wide :data:`DEFAULT_ALLOCATOR` is created at import time and used
whenever a builder is not handed an allocator explicitly. Tests and hosts that
want isolated numbering construct their own instance.

Examples
--------
>>> from html_decorations.allocator import ClassNameAllocator
>>> allocator = ClassNameAllocator()
>>> allocator.allocate("highlight")
'readium-highlight-1'
>>> allocator.allocate("highlight")
'readium-highlight-2'
"""

from __future__ import annotations

import logging
import re
import threading

from ._constants import CLASS_NAME_PREFIX, CLASS_NAME_TEMPLATE

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


class ClassNameAllocator:
    """Thread-safe source of unique ``<prefix>-<key>-<n>`` class names."""

    def __init__(self, prefix: str = CLASS_NAME_PREFIX) -> None:
        """Create an allocator whose counter starts at zero.

        Parameters
        ----------
        prefix : str, optional
            Leading segment of every allocated name. Defaults to
            ``"readium"``.

        Raises
        ------
        ValueError
            If ``prefix`` is not a valid CSS identifier fragment.
        """
        _check_segment("prefix", prefix)
        self.prefix = prefix
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def last_index(self) -> int:
        """Return the counter value used by the most recent allocation."""
        with self._lock:
            return self._counter

    def allocate(self, key: str) -> str:
        """Return a class name that no earlier call on this allocator produced.

        Raises
        ------
        ValueError
            If ``key`` is empty or not a valid CSS identifier fragment.
        """
        _check_segment("key", key)
        with self._lock:
            self._counter += 1
            index = self._counter
        name = CLASS_NAME_TEMPLATE.format(prefix=self.prefix, key=key, index=index)
        logger.debug("allocated class name %s", name)
        return name


def _check_segment(label: str, value: str) -> None:
    if not isinstance(value, str) or not _KEY_PATTERN.match(value):
        msg = f"Class name {label} must be a CSS identifier fragment, got {value!r}."
        raise ValueError(msg)


DEFAULT_ALLOCATOR = ClassNameAllocator()


__all__ = ["DEFAULT_ALLOCATOR", "ClassNameAllocator"]
