"""expressgen -- interactive generator for Express.js project skeletons."""

__version__ = "0.1.0"
