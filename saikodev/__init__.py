"""ROM build utilities and hardware definitions for 68000 arcade and console development."""

__version__ = "0.1.0"