"""CLI command modules."""

from .export import export
from .profile import profile
from .users import users

__all__ = [
    "users",
    "profile",
    "export",
]
