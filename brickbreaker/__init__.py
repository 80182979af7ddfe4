"""Brick-breaker game pieces with an in-memory drawing toolkit, window input model and JPEG parameter helpers."""

__version__ = "0.1.0"