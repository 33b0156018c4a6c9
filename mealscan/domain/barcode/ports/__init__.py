"""Barcode domain ports (interfaces)."""

from mealscan.domain.barcode.ports.barcode_provider import IBarcodeProvider

__all__ = ["IBarcodeProvider"]
