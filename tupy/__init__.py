"""Request bodies and response models for a music streaming Web API."""

__version__ = "0.1.0"