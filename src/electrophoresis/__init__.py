"""Educational gel electrophoresis simulator."""
__version__ = "0.1.0"
