from .resolver_cli import app, main

__all__ = ["app", "main"]
