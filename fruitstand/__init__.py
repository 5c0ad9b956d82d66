"""Fruit Stand: a small server-rendered MVC demo built on FastAPI."""

__version__ = "1.0.0"
