"""Test suite for filekit.

Test Structure:
- unit/core/: Value types, errors, sync and async services, dispatch, locations
- unit/config/: Configuration models and loader
- unit/logging/: Logging setup
- integration/: End-to-end cache folder scenario
- conftest.py: Shared fixtures (services, temporary folders, async result collection)
"""
