"""
Pickmin API Package
Error translation for the calling web layer
"""

from .errors import register_exception_handlers, validation_exception_handler

__all__ = ["register_exception_handlers", "validation_exception_handler"]
