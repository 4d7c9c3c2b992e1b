"""Fetch, parse and transform pipeline."""
