"""Home-screen style widget for the Sticky Notes app."""

__version__ = "0.1.0"
