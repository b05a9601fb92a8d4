"""Boundary layer: database persistence and the external AI client."""
