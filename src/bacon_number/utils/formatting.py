"""
Helpers for turning query input and output into display text.
"""

from typing import List

from bacon_number.solver.models import Hop


def clean_input_name(raw_name: str) -> str:
    """Returns the actor name typed by a user, without surrounding whitespace.

    Args:
      raw_name: The name as read from the prompt.

    Returns:
      The cleaned name.

    Examples:
      "  Bacon, Kevin\\n"   =>   "Bacon, Kevin"
    """
    return raw_name.strip()


def format_hop(hop: Hop) -> str:
    """Returns one hop as a display line.

    Examples:
      Hop("Hanks, Tom", "Bacon, Kevin", "Apollo 13")   =>   'Hanks, Tom - Bacon, Kevin: "Apollo 13"'
    """
    return f'{hop.actor} - {hop.co_star}: "{hop.movie}"'


def format_chain(hops: List[Hop]) -> List[str]:
    """Returns every hop of a chain as display lines, in chain order."""
    return [format_hop(hop) for hop in hops]
