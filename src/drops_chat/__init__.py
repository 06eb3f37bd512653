"""drops-chat -- streaming chat relay for the Drops portfolio assistant."""

__version__ = '0.1.0'
