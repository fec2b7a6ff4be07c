"""Reading and validating .cub scene files, with the string and I/O helpers they use."""

__version__ = "0.1.0"