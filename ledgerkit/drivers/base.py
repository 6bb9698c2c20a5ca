"""Base class for external collaborators."""

from __future__ import annotations

from abc import ABC


class Driver(ABC):
    """An external collaborator the client reaches through a narrow interface."""

    name: str = ""

    def __repr__(self) -> str:
        if self.name:
            return f"{type(self).__name__}({self.name!r})"
        return f"{type(self).__name__}()"
