"""Strongly typed identifiers for domain entities.

Image ids are the Flickr photo ids, kept as strings. Vote record ids are
the surrogate integer keys of the votes table.
"""

from typing import NewType

ImageId = NewType("ImageId", str)
VoteRecordId = NewType("VoteRecordId", int)
