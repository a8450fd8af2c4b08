"""Utility helpers for Tracebag."""

from tracebag.utils.id_generators import IdGenerator, RandomUUIDGenerator

__all__ = [
    "IdGenerator",
    "RandomUUIDGenerator",
]
