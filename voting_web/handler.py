"""
Request handler for the voting page.

Every request, whatever its path, ends up in handle_request():
- POST records a vote from a JSON body and answers with JSON
- any other method renders the voting form with the current results
"""
import json
import logging

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from prometheus_client import Counter, Gauge
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from .models import (
    ErrorResponse,
    InvalidOptionError,
    MalformedRequestError,
    VoteRequest,
    VoteResponse,
    VotingError,
)
from .rendering import render_page
from .store import VoteStore

logger = logging.getLogger(__name__)

# Prometheus metrics
votes_submitted_total = Counter(
    "votes_submitted_total",
    "Total number of votes accepted",
    ["option"]
)
vote_errors_total = Counter(
    "vote_errors_total",
    "Total number of rejected vote submissions",
    ["error_type"]
)
current_vote_totals = Gauge(
    "current_vote_totals",
    "Current vote totals",
    ["option"]
)


def reject_constant(name: str):
    """Refuse NaN and Infinity, which json accepts but are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


async def read_vote(request: Request) -> VoteRequest:
    """
    Parse and validate the vote carried by a POST body.

    Raises:
        MalformedRequestError: body unreadable or not JSON
        InvalidOptionError: vote missing, not a string or unknown
    """
    try:
        body = await request.body()
        payload = json.loads(body.decode("utf-8"), parse_constant=reject_constant)
    except (ClientDisconnect, ValueError, RecursionError) as e:
        raise MalformedRequestError(str(e)) from e

    try:
        return VoteRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidOptionError(payload) from e


async def submit_vote(request: Request, store: VoteStore) -> Response:
    """Record one vote and acknowledge it."""
    try:
        vote = await read_vote(request)
        option = vote.vote.value
        count = store.increment(option)
    except VotingError as e:
        vote_errors_total.labels(error_type=e.error_type).inc()
        logger.warning(f"Vote rejected: {e.error_type} ({e!r})")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=e.message).model_dump()
        )

    votes_submitted_total.labels(option=option).inc()
    current_vote_totals.labels(option=option).set(count)
    logger.info(f"Vote submitted: option={option}, count={count}")

    return JSONResponse(content=VoteResponse().model_dump())


def show_page(store: VoteStore) -> Response:
    """Render the voting form with the current tally."""
    return HTMLResponse(content=render_page(store.get()))


async def handle_request(request: Request, store: VoteStore) -> Response:
    """Map one inbound request to one response."""
    if request.method == "POST":
        return await submit_vote(request, store)
    return show_page(store)
