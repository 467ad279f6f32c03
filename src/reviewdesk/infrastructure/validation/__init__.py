"""File validation adapters."""
