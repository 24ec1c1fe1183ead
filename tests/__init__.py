"""Test suite for blickline.

Test Structure:
- unit/: Unit tests for individual components
  - timing/: Blick units and the tempo/measure TimeAxis
  - curves/: Parameter catalog, interpolation, simplification, CurveStore
  - config/: App config loading and validation
  - utils/: Logging and math helpers
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
