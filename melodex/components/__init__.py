"""Components: pure domain computation used by services."""
