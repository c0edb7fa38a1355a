"""swiftfw - Scaffold iOS Swift framework projects."""

__version__ = "0.1.0"
