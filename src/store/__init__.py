"""Row loading layer.

This module renders or persists derived rows for each monthly file.
It owns database connections and conflict-safe insertion.
"""
