"""
Infrastructure layer package.

Storage adapters: the SQLAlchemy engine factory and the blog
repository that implements the domain ports against it.
"""
