"""Reach use cases."""

from .add_reach import AddReachRequest, AddReachUseCase, ReachResponse
from .get_reach import GetReachRequest, GetReachUseCase

__all__ = [
    "AddReachRequest",
    "AddReachUseCase",
    "ReachResponse",
    "GetReachRequest",
    "GetReachUseCase",
]
