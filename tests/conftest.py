"""Test configuration for the library API."""

from tests.fixtures import *  # noqa: F401,F403
