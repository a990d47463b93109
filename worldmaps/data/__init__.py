"""Bundled reserved-name data files."""
