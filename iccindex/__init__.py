"""Construction cost index processing: decoding, variations and binary export."""

__version__ = "0.1.0"