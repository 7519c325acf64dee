from .async_helper import sync

__all__ = ["sync"]
