"""Straightforward reference implementations used to cross-check the tree."""

from __future__ import annotations

from fenwick.reference.naive_prefix import NaivePrefixArray

__all__ = ["NaivePrefixArray"]
