"""
Simple voting website.

A single page shows a bilingual fruit poll together with the current
results; votes are posted back to the same URL as JSON and kept in memory.
"""

from .models import (
    VoteChoice,
    VoteOption,
    VoteResult,
    VotingError,
    InvalidOptionError,
    MalformedRequestError,
    VOTE_OPTIONS,
    OPTION_IDS,
)
from .store import VoteStore
from .rendering import compute_percentages, render_page
from .handler import handle_request

__all__ = [
    'VoteChoice',
    'VoteOption',
    'VoteResult',
    'VotingError',
    'InvalidOptionError',
    'MalformedRequestError',
    'VOTE_OPTIONS',
    'OPTION_IDS',
    'VoteStore',
    'compute_percentages',
    'render_page',
    'handle_request',
]

__version__ = '1.0.0'
