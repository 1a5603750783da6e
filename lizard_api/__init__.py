"""Serverless endpoint that serves a single lizard photo."""

__version__ = "0.1.0"
