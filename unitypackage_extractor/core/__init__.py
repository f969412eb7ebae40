"""Extraction pipeline: unpacking and path reconstruction."""
