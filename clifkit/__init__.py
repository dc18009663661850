"""Building blocks for command line interfaces: terminal width, wrapping, parameters, registries, progress bars and tables."""

__version__ = "0.1.0"