"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Store operations return StoreResult; they do not raise for ordinary failures.
- No env var reads here (config-only).
"""
