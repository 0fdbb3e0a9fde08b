"""
Infrastructure adapters for the blog bounded context.

Each adapter implements a domain port (ABC) and connects
to the relational store through SQLAlchemy.
"""
