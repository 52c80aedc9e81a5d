"""Core configuration and types."""

from pointfree.core.config import Settings, settings
from pointfree.core.enums import ExcessArgs
from pointfree.core.types import Arity, validate_arity

__all__ = [
    "Settings",
    "settings",
    "ExcessArgs",
    "Arity",
    "validate_arity",
]
