"""
Services Layer - path operations bound to a configured platform.
"""

from portpath.services.path_service import PathService

__all__ = [
    "PathService",
]
