"""restrack: residence tracker command-line front end."""

__version__ = "0.1.0"
