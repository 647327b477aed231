"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps
"""

from vitae.utils.timestamp import session_stamp, today

__all__ = ["session_stamp", "today"]
