"""apidom-validate: validate API description documents from the command line."""

__version__ = "0.1.0"
