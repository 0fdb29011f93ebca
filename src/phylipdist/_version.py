__version__ = "2026.10.16a1"
