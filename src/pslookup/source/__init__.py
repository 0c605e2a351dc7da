"""Line sources for building suffix trees."""

from pslookup.source.reader import ReadError, load_suffix_tree, read_lines

__all__ = ["ReadError", "load_suffix_tree", "read_lines"]
