"""confsweep - settings storage with package-manager uninstall cleanup."""

__version__ = "0.1.0"
