"""Dispatch module."""

from .queue import MAX_QUEUE_SIZE, DispatchQueue, IDispatchQueue

__all__ = ["DispatchQueue", "IDispatchQueue", "MAX_QUEUE_SIZE"]
