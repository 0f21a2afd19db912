"""Exact monetary amounts with currencies, formatting, lossless allocation and text encodings."""

__version__ = "1.0.0"

__all__ = ["calculator", "formatter", "currency", "registry", "money", "db"]