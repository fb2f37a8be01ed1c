"""
Agency notation grammars.

Moody's uses the Aaa/Aa1.../C scale; S&P and Fitch share the AAA/AA+.../D
scale. Each agency also has an investment-grade subset, down to Baa3 for
Moody's and BBB- for S&P and Fitch.
"""

import re
from enum import Enum
from typing import Optional


class Agency(str, Enum):
    MOODYS = "MOODYS"
    SP = "SP"
    FITCH = "FITCH"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["Agency"]:
        """Case-insensitive lookup; None for blank or unknown names."""
        if name is None or not name.strip():
            return None
        try:
            return cls(name.strip().upper())
        except ValueError:
            return None


MOODYS_PATTERN = re.compile(r"Aaa|(Aa|A|Baa|Ba|B|Caa)[1-3]|Ca|C")
SP_FITCH_PATTERN = re.compile(r"AAA|(AA|A|BBB|BB|B|CCC)[+-]?|CC|C|D")

MOODYS_INVESTMENT_PATTERN = re.compile(r"Aaa|(Aa|A|Baa)[1-3]")
SP_FITCH_INVESTMENT_PATTERN = re.compile(r"AAA|(AA|A|BBB)[+-]?")

_GRAMMARS = {
    Agency.MOODYS: MOODYS_PATTERN,
    Agency.SP: SP_FITCH_PATTERN,
    Agency.FITCH: SP_FITCH_PATTERN,
}

_INVESTMENT_GRAMMARS = {
    Agency.MOODYS: MOODYS_INVESTMENT_PATTERN,
    Agency.SP: SP_FITCH_INVESTMENT_PATTERN,
    Agency.FITCH: SP_FITCH_INVESTMENT_PATTERN,
}


def is_blank(notation: Optional[str]) -> bool:
    return notation is None or not notation.strip()


def is_valid(agency: Agency, notation: str) -> bool:
    """Whether the whole notation matches the agency's grammar. Case-sensitive."""
    return _GRAMMARS[agency].fullmatch(notation) is not None


def is_investment_grade(agency: Agency, notation: Optional[str]) -> bool:
    if is_blank(notation):
        return False
    return _INVESTMENT_GRAMMARS[agency].fullmatch(notation) is not None


def is_speculative_grade(agency: Agency, notation: Optional[str]) -> bool:
    """A present, well-formed notation that is not investment grade."""
    if is_blank(notation) or not is_valid(agency, notation):
        return False
    return not is_investment_grade(agency, notation)

