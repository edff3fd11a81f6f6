"""regform — registration form validation and persistence toolkit."""

__version__ = "0.1.0"
