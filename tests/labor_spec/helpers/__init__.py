"""Test helpers for labor_spec unit tests."""

from __future__ import annotations

from .builders import make_account, make_authorities, make_authority

__all__ = [
    "make_account",
    "make_authorities",
    "make_authority",
]
