"""framedeps — dependency-graph core for prebuilt framework dependencies."""

__version__ = "0.1.0"
