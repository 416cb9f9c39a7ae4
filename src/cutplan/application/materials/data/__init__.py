"""Bundled material data files."""
