"""Shared constants, settings, errors and logging for unitypackage_extractor."""
