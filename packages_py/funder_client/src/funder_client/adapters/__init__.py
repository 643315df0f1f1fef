"""
Adapters for funder_client.
"""
from .funder_adapter import AsyncFunder, Funder

__all__ = ["AsyncFunder", "Funder"]
