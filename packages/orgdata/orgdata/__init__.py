"""
orgdata

Decodes PostgreSQL composite and array values into the users / organizations /
teams / payment plans domain model and re-encodes that model to its external
JSON form.
"""

__version__ = "0.1.0"
