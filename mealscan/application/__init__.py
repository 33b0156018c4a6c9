"""Application layer: provider cascade and the recognition façade."""

from mealscan.application.recognition_service import (
    RecognitionService,
    create_recognition_service,
)

__all__ = ["RecognitionService", "create_recognition_service"]
