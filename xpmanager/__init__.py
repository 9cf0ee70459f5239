"""File, directory and password database encryption with Fernet keys, and string encoding."""

__version__ = "2.3.0"