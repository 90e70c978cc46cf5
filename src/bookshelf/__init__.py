# ABOUTME: Bookshelf - Google Books metadata lookup for media-server book libraries.
# ABOUTME: Parses book file names, finds the matching volume, and maps it to host metadata.

__version__ = "0.1.0"
