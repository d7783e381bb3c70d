"""Core services: paths, settings storage and theming."""
