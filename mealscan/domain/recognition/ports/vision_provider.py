"""Ports (interfaces) for recognition providers.

Two shapes exist:

- IVisionModelProvider: the primary provider. It exposes an ordered list of
  model variants and answers one prompt per call with a tagged
  ProviderResponse. Transient failures are raised as TransientProviderError.
- ILabelProvider: secondary label-detection providers (image classification).
  They return the best food label or None, and are tried once each.
"""

from typing import Optional, Protocol, Sequence, Tuple

from mealscan.domain.recognition.entities.provider_response import ProviderResponse


class IVisionModelProvider(Protocol):
    """
    Interface for the primary multi-model vision provider.

    Implementations can be:
    - OpenAI chat completions with image input (default)
    - Stub provider (for testing)
    """

    @property
    def name(self) -> str:
        ...

    @property
    def models(self) -> Sequence[str]:
        """Ordered model variants, tried strictly in sequence."""
        ...

    async def analyze(self, image_b64: str, prompt: str, model: str) -> ProviderResponse:
        """
        Send one image and prompt to one model.

        Args:
            image_b64: Base64 JPEG payload (no data-URL prefix)
            prompt: Instruction text
            model: One of `models`

        Returns:
            Success, StructuralFailure or Empty

        Raises:
            TransientProviderError: rate limit, overload, outage or timeout
        """
        ...


class ILabelProvider(Protocol):
    """
    Interface for secondary label-detection providers.

    Implementations:
    - Hugging Face image classification
    - Google Cloud Vision label detection
    """

    @property
    def name(self) -> str:
        ...

    async def detect_label(self, image_b64: str) -> Optional[Tuple[str, float]]:
        """
        Return the top food label and its score, or None if nothing usable.

        Raises:
            Exception: Implementation-specific errors (network, API)
        """
        ...
