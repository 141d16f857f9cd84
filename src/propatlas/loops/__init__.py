"""Resolution search loops."""

from .resolution import ResolutionLoop

__all__ = ['ResolutionLoop']
