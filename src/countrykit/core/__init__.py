"""Core module - subdivision model, country queries and dataset."""
