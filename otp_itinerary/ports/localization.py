"""Localization port - Message keys to display strings.

Implementation: adapters/localization/catalog.py
"""

from __future__ import annotations

from typing import Any, Protocol


class LocalizerPort(Protocol):
    """Port for turning a message key and parameters into display text."""

    def translate(self, key: str, **params: Any) -> str:
        """Look up ``key`` and substitute ``params`` into it.

        Args:
            key: Dotted message key, e.g. ``times_shortform.$n_minutes``.
            **params: Values for the message placeholders.

        Returns:
            The localized string.
        """
        ...
