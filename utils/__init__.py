"""
utils/ - Shared Utilities
=========================
Cross-cutting helpers (logging) used by every layer.
"""
