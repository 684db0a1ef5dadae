"""Read, write and inspect STAC values, their versions and extensions."""

__version__ = "0.1.0"