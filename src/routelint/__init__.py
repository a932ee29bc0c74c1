"""routelint — detect React Router patterns that cause component remounts."""

__version__ = "0.1.0"
