"""Interfaces: presentation-facing adapters over analytics results."""
