"""
Data models for the voting web service.

This module contains:
- VoteChoice: the fixed, closed set of option identifiers
- VoteOption / VoteResult: display data used to render the page
- Pydantic models for the JSON request and responses
- The error taxonomy raised by the store and the request handler
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


INVALID_OPTION_MESSAGE = "Invalid vote option"
INVALID_REQUEST_MESSAGE = "Invalid request"

# Option identifier -> vote count
VoteTally = Dict[str, int]


class VoteChoice(str, Enum):
    """Valid vote choices."""
    OPTION1 = "option1"
    OPTION2 = "option2"
    OPTION3 = "option3"


@dataclass(frozen=True)
class VoteOption:
    """An option shown on the voting form, with its bilingual label."""
    id: str
    label: str


VOTE_OPTIONS = (
    VoteOption(VoteChoice.OPTION1.value, "苹果 | Apple"),
    VoteOption(VoteChoice.OPTION2.value, "香蕉 | Banana"),
    VoteOption(VoteChoice.OPTION3.value, "橙子 | Orange"),
)

OPTION_IDS = tuple(option.id for option in VOTE_OPTIONS)


@dataclass(frozen=True)
class VoteResult:
    """Current standing of one option."""
    option: VoteOption
    count: int
    percentage: int


class VotingError(Exception):
    """Base class for user-facing vote submission errors."""

    message = INVALID_REQUEST_MESSAGE
    error_type = "voting_error"


class InvalidOptionError(VotingError):
    """Vote field missing, not a string, or not one of the fixed options."""

    message = INVALID_OPTION_MESSAGE
    error_type = "invalid_option"


class MalformedRequestError(VotingError):
    """Request body could not be read or is not valid JSON."""

    message = INVALID_REQUEST_MESSAGE
    error_type = "malformed_request"


class VoteRequest(BaseModel):
    """Vote submission request model."""

    vote: VoteChoice = Field(..., description="Option identifier")

    model_config = ConfigDict(
        json_schema_extra={"example": {"vote": "option1"}}
    )


class VoteResponse(BaseModel):
    """Vote submission response model."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
