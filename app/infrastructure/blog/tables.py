"""
Table definitions for the blog bounded context.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, Table, Text

metadata = MetaData()

blogs = Table(
    "blogs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Column("deleted_at", DateTime(timezone=True), nullable=True, index=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
)
