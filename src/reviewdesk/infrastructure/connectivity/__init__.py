"""Connectivity signal sources."""
