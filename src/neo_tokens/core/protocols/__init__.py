"""Token engine protocols."""

from .clock import Clock

__all__ = ["Clock"]
