"""Switch cargo configurations with ease."""

__version__ = "0.1.0"
