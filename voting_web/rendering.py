"""HTML rendering of the voting form and current results."""
from typing import List, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import VOTE_OPTIONS, VoteOption, VoteResult, VoteTally

_environment = Environment(
    loader=PackageLoader("voting_web", "templates"),
    autoescape=select_autoescape(["html"]),
)


def compute_percentages(tally: VoteTally) -> dict:
    """
    Percentage of the total for every option in tally.

    Each option is rounded on its own with round(), so the values are
    integers in [0, 100] that do not always add up to exactly 100.
    All percentages are 0 while no votes have been cast.
    """
    total = sum(tally.values())
    if total <= 0:
        return {option: 0 for option in tally}
    return {option: round(count / total * 100) for option, count in tally.items()}


def build_results(tally: VoteTally, options: Sequence[VoteOption] = VOTE_OPTIONS) -> List[VoteResult]:
    """Pair each option with its count and percentage."""
    percentages = compute_percentages(tally)
    return [
        VoteResult(
            option=option,
            count=tally.get(option.id, 0),
            percentage=percentages.get(option.id, 0),
        )
        for option in options
    ]


def render_page(tally: VoteTally, options: Sequence[VoteOption] = VOTE_OPTIONS) -> str:
    """Render the full HTML document for the given tally."""
    template = _environment.get_template("index.html")
    return template.render(
        options=options,
        results=build_results(tally, options),
        total=sum(tally.values()),
    )
