"""
Services: grid adapters and the tabular normalizer.

Import from the concrete modules:
- sheet_to_json.services.sheet_grid_parser
- sheet_to_json.services.tabular_normalizer
"""

__all__ = []
