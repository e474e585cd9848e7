"""Publish clipboard content to an R2 bucket and get a public URL back."""

__version__ = "0.1.0"
