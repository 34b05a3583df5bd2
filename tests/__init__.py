"""Test suite for eased.

Test Structure:
- core/curves/functions/: Per-family formula tests, catalog-wide properties
  and a cross-check against easing-functions
- core/curves/: Models, sampling, library, taxonomy, registry and semantics
- core/config/: Config models and the JSON/YAML loader
- core/utils/: Logging setup and IEEE 754 math helpers
- conftest.py: Shared fixtures
"""
