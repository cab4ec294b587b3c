"""Building blocks for a device test station: settings, test sites, message logs, a TCP client, debug commands and small utilities."""

__version__ = "0.1.0"