"""White-box SPN block cipher whose S-box is derived from a key with SHAKE128."""

__version__ = "0.1.0"