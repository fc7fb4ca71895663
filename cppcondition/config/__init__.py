"""Configuration schema and loading for cppcondition."""

from .loader import load_settings
from .schema import CppParsingSettings, InvalidConditionHandling

__all__ = [
    "CppParsingSettings",
    "InvalidConditionHandling",
    "load_settings",
]
