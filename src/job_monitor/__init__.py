"""Job duration monitoring for START/END CSV logs."""

__version__ = "0.1.0"
