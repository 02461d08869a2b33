"""Command line interface for zklogin."""

from .main import create_parser, main

__all__ = ["create_parser", "main"]
