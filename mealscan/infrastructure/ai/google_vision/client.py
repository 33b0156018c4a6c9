"""Google Cloud Vision label detection - implements ILabelProvider."""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from mealscan.config import DEFAULT_GOOGLE_VISION_URL

logger = logging.getLogger(__name__)

# Labels that say "this is food" without saying which food.
GENERIC_LABELS = frozenset(
    {
        "food",
        "dish",
        "cuisine",
        "ingredient",
        "recipe",
        "tableware",
        "dishware",
        "serveware",
        "plate",
        "meal",
        "produce",
        "staple food",
        "fast food",
        "comfort food",
        "finger food",
        "junk food",
        "natural foods",
        "baked goods",
        "table",
        "lunch",
        "breakfast",
        "dinner",
    }
)


class GoogleVisionLabelClient:
    """
    Google Cloud Vision `images:annotate` client (LABEL_DETECTION).

    Example:
        >>> async with GoogleVisionLabelClient(api_key="AIza...") as client:
        ...     label = await client.detect_label(image_b64)
    """

    TIMEOUT_S = 15.0
    MAX_RESULTS = 10

    def __init__(
        self,
        api_key: str,
        url: str = DEFAULT_GOOGLE_VISION_URL,
        timeout_s: float = TIMEOUT_S,
    ) -> None:
        if not api_key:
            raise ValueError("Google Vision API key is required")
        self._api_key = api_key
        self._url = url
        self._timeout_s = timeout_s
        self._session: Optional[httpx.AsyncClient] = None

    @property
    def name(self) -> str:
        return "Google Vision"

    async def __aenter__(self) -> "GoogleVisionLabelClient":
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

    async def detect_label(self, image_b64: str) -> Optional[Tuple[str, float]]:
        """
        Return the most confident specific food label.

        Raises:
            httpx.HTTPStatusError: non-2xx response
            RuntimeError: API reported an error for the image
        """
        session = self._ensure_session()
        body = {
            "requests": [
                {
                    "image": {"content": image_b64},
                    "features": [{"type": "LABEL_DETECTION", "maxResults": self.MAX_RESULTS}],
                }
            ]
        }
        response = await session.post(self._url, params={"key": self._api_key}, json=body)
        response.raise_for_status()
        data = response.json()

        responses = data.get("responses") or [{}]
        first: Dict[str, Any] = responses[0] or {}
        if "error" in first:
            message = (first.get("error") or {}).get("message", "unknown error")
            raise RuntimeError(f"Google Vision error: {message}")

        annotations: List[Dict[str, Any]] = first.get("labelAnnotations") or []
        for annotation in annotations:
            description = str(annotation.get("description") or "").strip()
            if not description or description.lower() in GENERIC_LABELS:
                continue
            score = _score(annotation.get("score"), default=0.7)
            logger.info("Google Vision label", extra={"label": description, "score": score})
            return description, score

        logger.info("Google Vision found no specific food label", extra={"labels": len(annotations)})
        return None


def _score(value: Any, default: float) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return default
    return min(1.0, max(0.0, score))
