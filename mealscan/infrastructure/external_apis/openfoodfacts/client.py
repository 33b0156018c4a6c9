"""OpenFoodFacts API client - implements IBarcodeProvider.

Key Features:
- OpenFoodFacts API v2 product lookup
- Circuit breaker (5 failures -> 60s open)
- Retry with exponential backoff on timeouts, network and 5xx errors
- Nutrient extraction with fallbacks (energy kJ -> kcal, salt -> sodium)
- Unit conversion: OpenFoodFacts reports minerals in g, the pipeline uses mg
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import httpx
from circuitbreaker import CircuitBreaker, CircuitBreakerError

from mealscan.config import DEFAULT_OPENFOODFACTS_URL
from mealscan.domain.barcode.entities.packaged_product import PackagedProduct
from mealscan.domain.errors import BarcodeLookupError
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.infrastructure.ai.retry import RetryPolicy

logger = logging.getLogger(__name__)

KJ_PER_KCAL = 4.184
# salt g -> sodium mg (salt is ~40% sodium)
SALT_TO_SODIUM_MG = 400.0
GRAMS_TO_MG = 1000.0


def _is_retryable_lookup_error(exc: BaseException) -> bool:
    return isinstance(exc, (httpx.HTTPError, asyncio.TimeoutError))


class OpenFoodFactsClient:
    """
    OpenFoodFacts API client implementing IBarcodeProvider.

    Example:
        >>> async with OpenFoodFactsClient() as client:
        ...     product = await client.lookup_barcode("8001505005707")
        ...     if product:
        ...         print(product.display_name())
    """

    BASE_URL = DEFAULT_OPENFOODFACTS_URL
    TIMEOUT_S = 8.0

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout_s: float = TIMEOUT_S,
        retry_policy: Optional[RetryPolicy] = None,
        failure_threshold: int = 5,
        recovery_timeout: int = 60,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session: Optional[httpx.AsyncClient] = None
        policy = retry_policy or RetryPolicy(base_delay_s=1.0, max_delay_s=10.0)
        self._retry = replace(policy, retryable=_is_retryable_lookup_error)
        self._breaker = CircuitBreaker(
            failure_threshold=failure_threshold,
            recovery_timeout=recovery_timeout,
            name="openfoodfacts_lookup",
        )
        # decorated wrapper rejects calls while the circuit is open
        self._guarded_lookup = self._breaker(self._lookup_with_retry)

    async def __aenter__(self) -> "OpenFoodFactsClient":
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def _ensure_session(self) -> httpx.AsyncClient:
        if self._session is None:
            self._session = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout_s))
        return self._session

    async def aclose(self) -> None:
        if self._session:
            await self._session.aclose()
            self._session = None

    async def lookup_barcode(self, barcode: str) -> Optional[PackagedProduct]:
        """
        Look up a product by barcode.

        Args:
            barcode: Normalized EAN/UPC code (e.g., "8001505005707")

        Returns:
            PackagedProduct if found, None if the database has no entry

        Raises:
            BarcodeLookupError: Circuit open, or network/server errors
                persisted after retries
        """
        try:
            return await self._guarded_lookup(barcode)
        except CircuitBreakerError as exc:
            logger.warning("OpenFoodFacts circuit open", extra={"barcode": barcode})
            raise BarcodeLookupError(f"OpenFoodFacts unavailable: {exc}") from exc
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.error(
                "OpenFoodFacts API error",
                extra={"barcode": barcode, "error": str(exc)},
            )
            raise BarcodeLookupError(f"OpenFoodFacts lookup failed: {exc}") from exc

    async def _lookup_with_retry(self, barcode: str) -> Optional[PackagedProduct]:
        return await self._retry.run(lambda: self._lookup_once(barcode))

    async def _lookup_once(self, barcode: str) -> Optional[PackagedProduct]:
        session = self._ensure_session()
        url = f"{self._base_url}/{barcode}.json"

        logger.debug("Looking up barcode", extra={"barcode": barcode})
        response = await session.get(url)

        if response.status_code == 404:
            logger.info("Barcode not found", extra={"barcode": barcode})
            return None

        # Server errors - let retry/circuit breaker handle
        if response.status_code >= 500:
            logger.warning(
                "OpenFoodFacts server error",
                extra={"barcode": barcode, "status": response.status_code},
            )
            raise httpx.HTTPError(f"Server error {response.status_code}")

        if response.status_code != 200:
            logger.warning(
                "Unexpected status code",
                extra={"barcode": barcode, "status": response.status_code},
            )
            return None

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("Response body is not JSON", extra={"barcode": barcode})
            raise BarcodeLookupError(f"OpenFoodFacts returned an invalid body: {exc}") from exc
        if not isinstance(data, dict):
            logger.warning(
                "Unexpected response payload",
                extra={"barcode": barcode, "payload_type": type(data).__name__},
            )
            raise BarcodeLookupError("OpenFoodFacts returned an invalid body")

        # API returns status=0 for unknown products
        if data.get("status") != 1:
            logger.info("Product not found (status=0)", extra={"barcode": barcode})
            return None

        product_data = data.get("product") or {}
        if not isinstance(product_data, dict) or not product_data:
            logger.warning("Empty product data", extra={"barcode": barcode})
            return None

        product = self._map_to_product(barcode, product_data)
        logger.info(
            "Barcode lookup successful",
            extra={"barcode": barcode, "product_name": product.name},
        )
        return product

    def _map_to_product(self, barcode: str, product_data: Dict[str, Any]) -> PackagedProduct:
        name = (
            product_data.get("product_name")
            or product_data.get("generic_name")
            or "Unknown Product"
        )

        # First brand if multiple
        brands = product_data.get("brands") or ""
        brand = brands.split(",")[0].strip() or None

        return PackagedProduct(
            barcode=barcode,
            name=name,
            brand=brand,
            nutrition_per_100g=self._extract_nutrition(product_data),
            labels=self._extract_labels(product_data),
            ingredients_text=product_data.get("ingredients_text") or None,
            image_url=product_data.get("image_front_url") or product_data.get("image_url"),
        )

    @staticmethod
    def _extract_labels(product_data: Dict[str, Any]) -> Tuple[str, ...]:
        tags = product_data.get("labels_tags")
        if isinstance(tags, list) and tags:
            return tuple(str(tag) for tag in tags if tag)
        labels = product_data.get("labels") or ""
        return tuple(part.strip() for part in str(labels).split(",") if part.strip())

    @staticmethod
    def _extract_nutrition(product_data: Dict[str, Any]) -> NutritionVector:
        """
        Extract per-100g nutrition.

        - Calories: prefer energy-kcal_100g, fallback to energy_100g (kJ) / 4.184
        - Sodium: prefer sodium_100g, fallback to salt_100g * 400
        - Sodium, calcium, iron and vitamin C are converted from g to mg
        """
        nutriments = product_data.get("nutriments") or {}

        def get_float(key: str) -> Optional[float]:
            value = nutriments.get(key)
            try:
                return float(value) if value is not None else None
            except (TypeError, ValueError):
                return None

        calories = get_float("energy-kcal_100g")
        if calories is None:
            energy_kj = get_float("energy_100g")
            if energy_kj is not None:
                calories = energy_kj / KJ_PER_KCAL

        sodium_g = get_float("sodium_100g")
        if sodium_g is not None:
            sodium = sodium_g * GRAMS_TO_MG
        else:
            salt_g = get_float("salt_100g")
            sodium = salt_g * SALT_TO_SODIUM_MG if salt_g is not None else None

        def mg(key: str) -> Optional[float]:
            grams = get_float(key)
            return grams * GRAMS_TO_MG if grams is not None else None

        return NutritionVector.from_mapping(
            {
                "calories": calories,
                "protein": get_float("proteins_100g"),
                "carbs": get_float("carbohydrates_100g"),
                "fat": get_float("fat_100g"),
                "fiber": get_float("fiber_100g"),
                "sugar": get_float("sugars_100g"),
                "sodium": sodium,
                "calcium": mg("calcium_100g"),
                "iron": mg("iron_100g"),
                "vitamin_c": mg("vitamin-c_100g"),
            }
        )
