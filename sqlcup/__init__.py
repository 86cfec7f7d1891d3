"""
sqlcup

A Python package for generating SQL statements for sqlc: a CREATE TABLE
statement and CRUD query templates from a compact table description.
"""

from sqlcup.cli.generator import ScaffoldGenerator

__all__ = ["ScaffoldGenerator"]
