"""Matching and partnership use cases."""

from .accept_request import AcceptRequestUseCase
from .get_suggestions import GetSuggestionsUseCase
from .list_requests import ListRequestsUseCase
from .reject_request import RejectRequestUseCase
from .send_request import SendRequestUseCase
from .unmatch import UnmatchUseCase

__all__ = [
    "AcceptRequestUseCase",
    "GetSuggestionsUseCase",
    "ListRequestsUseCase",
    "RejectRequestUseCase",
    "SendRequestUseCase",
    "UnmatchUseCase",
]
