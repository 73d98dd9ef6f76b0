"""Catalog, trigger evaluation and the derived progression calculators."""
