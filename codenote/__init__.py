"""
CodeNote: note title and summary derivation.

A model-backed primary path guarded by a timeout and a refusal denylist,
with a deterministic heuristic fallback.
"""

__version__ = "0.1.0"
