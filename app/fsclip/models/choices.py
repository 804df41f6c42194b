"""Enumerated answers for interactive prompts.

Each prompt offers an ordered set of labelled choices. The enum member
order is the order presented to the user, and the value is the label.
"""

from enum import Enum


class OverwriteChoice(str, Enum):
    """Answer to "<path> already exists. Overwrite?"."""

    OVERWRITE = "Yes"
    SKIP = "No"
    RENAME = "Rename"


class ConfirmChoice(str, Enum):
    """Plain yes/no answer."""

    YES = "Yes"
    NO = "No"


class ApplyChoice(str, Enum):
    """Answer to "Should your changes be applied?" for bulk renames."""

    YES = "Yes"
    NO = "No"
    DIFF = "Diff"


class DestinationChoice(str, Enum):
    """Where to paste relative to a selected directory."""

    SAME_LEVEL = "same level"
    INSIDE = "inside"
