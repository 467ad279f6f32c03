"""Remote authority adapters."""
