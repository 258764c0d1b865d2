"""Hypothesis strategies for contexterror property-based testing.

Usage:
    from tests.strategies import contexts, context_ranges

Event-Emitting Strategies (HypoFuzz-Optimized):
    - ctx_size: Context length classification (empty|short|long)
    - ctx_range_shape: Range shape (single|forward|reversed)
    - ctx_range_bounds: Whether an endpoint falls outside the context
"""

from .context import context_ranges, contexts

__all__ = ["context_ranges", "contexts"]
