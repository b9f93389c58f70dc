#!/usr/bin/env python3
"""
Base classes for format handlers.

FormatHandler is the abstract base class both document formats implement.
A handler turns document text into a Catalog plus its ordered language
list, and renders a Catalog back into document text. Handlers never touch
the filesystem; reading and writing files is the converter's job.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..catalog import Catalog


class FormatHandler(ABC):
    """
    Abstract base class for format-specific handlers.

    Subclasses implement ``parse`` (document text -> model) and
    ``reconstruct`` (model -> document text) for a single format.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format name used by the registry."""
        pass

    @abstractmethod
    def parse(self, content: str) -> tuple[Catalog, list[str]]:
        """
        Parse document content into the catalog model.

        Args:
            content: Whole document as text

        Returns:
            Tuple of (catalog, ordered language codes)

        Raises:
            ParseError: Content is malformed or does not match the schema
        """
        pass

    @abstractmethod
    def reconstruct(
        self,
        catalog: Catalog,
        languages: Optional[list[str]] = None,
    ) -> str:
        """
        Render a catalog as a complete document.

        Args:
            catalog: Fully built catalog
            languages: Ordered language codes (formats that lay out
                languages positionally use this; others may ignore it)

        Returns:
            Document text
        """
        pass


class FormatRegistry:
    """Registry of available format handlers."""

    _handlers: dict[str, type[FormatHandler]] = {}

    @classmethod
    def register(cls, handler_class: type[FormatHandler]) -> None:
        """Register a format handler class."""
        # name is an instance property
        handler = handler_class()
        cls._handlers[handler.name.lower()] = handler_class

    @classmethod
    def get_handler(cls, name: str) -> FormatHandler:
        """Get handler instance by name."""
        name_lower = name.lower()
        if name_lower not in cls._handlers:
            available = ', '.join(cls._handlers.keys())
            raise ValueError(f"Unknown format: {name}. Available: {available}")
        return cls._handlers[name_lower]()

