"""Factories for building configured token engines."""

from .token_engine_factory import create_token_engine

__all__ = ["create_token_engine"]
