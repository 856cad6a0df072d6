"""Structural protocol parts for provider SDK objects."""
