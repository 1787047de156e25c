"""Test package for mapcluster.

This package contains:
- Unit tests (test_geometry.py, test_bbox_cache.py, test_eligibility.py,
  test_neighbors.py, test_builder.py, test_store.py, test_config.py)
- Engine tests (test_engine.py)
- Shared fixtures (conftest.py)
"""
