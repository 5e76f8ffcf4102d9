"""Core value models shared across layers."""

from .page import Page, PageRequest

__all__ = ["Page", "PageRequest"]
