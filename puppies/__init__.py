"""Puppies: vote on Flickr puppy photos."""

__version__ = "0.1.0"
