"""Pytest configuration and shared fixtures."""

from hypothesis import settings

# Key derivation stretches phrases with PBKDF2, so examples are not fast.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
