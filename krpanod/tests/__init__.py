"""
Test suite for the `krpanod` module.

This package contains unit tests for `krpanod` functionality, including:

- `template` tests: tokenizing url templates, side expansion, rendering and formatting.
- `multires` tests: resolution ladders, defaults and per-entry errors.
- `metadata` tests: reading krpano XML documents into declaration trees.
- `core` tests: resolving levels and shapes into level descriptions.
- `tiles` tests: per-side zoom levels and tile urls.
- `my_utils` tests: file loading, argument parsing and formatting helpers.

Usage:

    # Run all tests in the package
    pytest krpanod/tests

    # Run a specific test file
    pytest krpanod/tests/test_core.py
"""
