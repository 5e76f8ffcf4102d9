"""Shared pytest fixtures for the library API tests."""

from .core import *  # noqa: F401,F403
from .services import *  # noqa: F401,F403
