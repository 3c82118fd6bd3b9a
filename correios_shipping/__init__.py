"""Correios shipping rate plugin."""

__version__ = "1.0.0"
