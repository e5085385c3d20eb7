"""errauditor: audit where Go functions build and propagate their errors."""

__version__ = "0.3.0"
