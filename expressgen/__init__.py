"""expressgen -- Node.js + Express project generator."""

__version__ = "0.1.0"
