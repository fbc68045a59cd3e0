#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/heading_ids.py
"""Per-render registry keeping heading identifiers unique."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class HeadingIdRegistry:
    """Allocate unique heading ids within one render session.

    Each seen id maps to the number of times it has been disambiguated. The
    table only grows during a render.

    Examples
    --------
        >>> registry = HeadingIdRegistry()
        >>> [registry.ensure_unique(i) for i in ["intro", "intro", "intro"]]
        ['intro', 'intro-1', 'intro-2']

    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def __contains__(self, heading_id: object) -> bool:
        return heading_id in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def ensure_unique(self, heading_id: str) -> str:
        """Return ``heading_id`` or a suffixed variant not handed out before.

        An unseen id is registered and returned unchanged. For a seen id the
        next ``{id}-{n}`` is tried; when that candidate is itself taken, the
        result is ``{id}-1`` without trying further suffixes. That last case can
        repeat an id that was already returned.

        Parameters
        ----------
        heading_id : str
            Candidate id

        Returns
        -------
        str
            Id to emit

        """
        count = self._counts.get(heading_id)
        if count is None:
            self._counts[heading_id] = 0
            return heading_id

        candidate = f"{heading_id}-{count + 1}"
        if candidate not in self._counts:
            self._counts[heading_id] = count + 1
            self._counts[candidate] = 0
            logger.debug(f"Heading id '{heading_id}' already used, assigned '{candidate}'")
            return candidate

        fallback = f"{heading_id}-1"
        logger.warning(f"Heading id '{heading_id}' and '{candidate}' already used, falling back to '{fallback}'")
        self._counts.setdefault(fallback, 0)
        return fallback

    def reset(self) -> None:
        """Forget every registered id."""
        self._counts.clear()


__all__ = ["HeadingIdRegistry"]
