"""Food recognition and nutrition reports.

Photo flow: image preprocessing, provider cascade, nutrition resolution
(local catalog, AI generation, category fallback) and aggregation into a
RecognitionReport. Barcode flow: OpenFoodFacts lookup formatted as a
per-100g report.
"""

__version__ = "0.3.0"
