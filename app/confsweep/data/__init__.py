"""Bundled data files for confsweep."""
