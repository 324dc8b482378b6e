"""SQLAlchemy table definitions for the vote store."""

from sqlalchemy import Column, Integer, MetaData, String, Table

# Metadata object for all tables
metadata = MetaData()

votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("puppy_id", String, nullable=False, unique=True),  # Flickr photo id
    Column("up_votes", Integer, nullable=False, server_default="0"),
    Column("down_votes", Integer, nullable=False, server_default="0"),
)
