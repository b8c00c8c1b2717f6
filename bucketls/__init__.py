"""List, filter and delete objects in an S3 bucket."""

__version__ = "0.1.0"
