"""Hugging Face image classification - implements ILabelProvider.

Secondary provider used after the primary vision models are exhausted.
Calls the Inference API for an ImageNet classifier (google/vit-base-patch16-224
by default) and returns the top label.
"""

import logging
from typing import Any, Optional, Tuple

import httpx

from mealscan.config import DEFAULT_HUGGINGFACE_URL

logger = logging.getLogger(__name__)


class HuggingFaceLabelClient:
    """
    Hugging Face Inference API client.

    Example:
        >>> async with HuggingFaceLabelClient(api_key="hf_...") as client:
        ...     label = await client.detect_label(image_b64)
    """

    TIMEOUT_S = 20.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: str = DEFAULT_HUGGINGFACE_URL,
        timeout_s: float = TIMEOUT_S,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout_s = timeout_s
        self._session: Optional[httpx.AsyncClient] = None

    @property
    def name(self) -> str:
        return "Hugging Face Vision"

    async def __aenter__(self) -> "HuggingFaceLabelClient":
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
        Classify the image and return (label, score) for the top class.

        ImageNet labels come as comma separated synonyms
        ("pizza, pizza pie"); only the first synonym is kept.

        Raises:
            httpx.HTTPStatusError: non-2xx response (model loading, auth)
            httpx.TransportError: network failure
        """
        session = self._ensure_session()
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        response = await session.post(
            self._url,
            headers=headers,
            json={"inputs": image_b64, "options": {"wait_for_model": True}},
        )
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, list) or not data:
            logger.info("Hugging Face returned no classes", extra={"payload_type": type(data).__name__})
            return None

        top = data[0] if isinstance(data[0], dict) else {}
        raw_label = str(top.get("label") or "").split(",")[0].strip()
        if not raw_label:
            return None
        score = _score(top.get("score"), default=0.7)

        logger.info("Hugging Face label", extra={"label": raw_label, "score": score})
        return raw_label.title(), score


def _score(value: Any, default: float) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return default
    return min(1.0, max(0.0, score))
