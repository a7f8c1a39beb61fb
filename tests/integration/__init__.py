"""
Integration tests for melodex.

These tests exercise the application end to end:
- Real configuration composition (YAML files and environment)
- Logging setup
- The analytics service over a full reference catalog
"""
