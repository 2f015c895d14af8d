from enum import Enum

from hustler_rules.models import RuleOutcome


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class UIMarker(str, Enum):
    COPIED = "✓"
    REJECTED = "✗"
    WARNING = "⚠"
    EXAMPLE = "+"


OUTCOME_STYLE = {
    RuleOutcome.COPIED: UIStyle.GREEN.value,
    RuleOutcome.MISSING_DEPENDENCIES: UIStyle.RED.value,
    RuleOutcome.PARSE_ERROR: UIStyle.YELLOW.value,
}
