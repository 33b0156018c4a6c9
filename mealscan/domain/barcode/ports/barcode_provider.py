"""Port (interface) for barcode product databases."""

from typing import Optional, Protocol

from mealscan.domain.barcode.entities.packaged_product import PackagedProduct


class IBarcodeProvider(Protocol):
    """
    Interface for barcode lookup providers.

    Implementations can be:
    - OpenFoodFacts (default)
    - Mock provider (for testing)
    """

    async def lookup_barcode(self, barcode: str) -> Optional[PackagedProduct]:
        """
        Look up a product by barcode.

        Args:
            barcode: Normalized EAN/UPC code

        Returns:
            PackagedProduct if found, None if the database has no such product

        Raises:
            BarcodeLookupError: database unreachable after retries
        """
        ...
