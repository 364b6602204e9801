"""Localization adapters - Implementations of LocalizerPort.

Available implementations:
- CatalogLocalizer: Looks messages up in bundled per-locale catalogs
"""

from .catalog import CATALOGS, CatalogLocalizer

__all__ = ["CatalogLocalizer", "CATALOGS"]
