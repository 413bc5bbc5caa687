"""Common module — shared constants, errors, filters and helpers."""
