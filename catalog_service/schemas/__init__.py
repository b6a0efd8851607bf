"""
==============================================================================
Schemas Package
==============================================================================

Pydantic response envelopes.

==============================================================================
"""

from .common import PagedResult

__all__ = ["PagedResult"]
