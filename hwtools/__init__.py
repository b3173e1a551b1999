"""Hardware tool plugin host: manifest loading, schema projection and argument normalization."""

__version__ = "0.1.0"
