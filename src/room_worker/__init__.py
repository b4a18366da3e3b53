"""Room worker: periodic room participant and listener count reporting."""

__version__ = "0.1.0"
