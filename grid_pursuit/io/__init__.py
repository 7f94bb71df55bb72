"""Persistence formats: Arrow schemas, output paths, and text layouts."""
