"""
Durable store for the Info Lookup service.
"""

from .postgres import PostgresInfoStore

__all__ = ["PostgresInfoStore"]
