"""Status use cases."""
