"""
Form submission access used by the fill-on-submit hook.
"""

from typing import Any, Mapping, Optional, Protocol


class FormRequest(Protocol):
    """Anything that can answer whether a key was submitted and return it."""

    def has(self, key: str) -> bool:
        ...

    def get(self, key: str) -> Any:
        ...


class MappingRequest:
    """Submitted form data backed by a plain mapping."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        """
        Initialize request wrapper.

        Args:
            data: Submitted key/value pairs
        """
        self.data = dict(data or {})

    def has(self, key: str) -> bool:
        # A key submitted with a None/empty value still counts as present
        return key in self.data

    def get(self, key: str) -> Any:
        return self.data.get(key)
