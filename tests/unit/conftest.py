"""Unit test configuration.

Unit tests must not depend on credentials or external services.
"""
