"""Cancellation token implementation parts."""
