"""Output model parts (one concern per module)."""
