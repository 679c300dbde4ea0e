"""Ingestion layer.

This package turns raw ``xset q`` report text into normalized key status
models.
"""

__all__: list[str] = []
