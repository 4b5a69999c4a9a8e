"""engineroom - transcoding engine registry for DLNA media servers."""

__version__ = "0.1.0"
