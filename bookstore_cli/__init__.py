"""CLI package for the Book Store console"""
from .main import cli
from .shell import BookstoreShell

__all__ = ['cli', 'BookstoreShell']
