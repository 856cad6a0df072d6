"""Shared building blocks: DTOs, output models, errors, logging, metrics."""
