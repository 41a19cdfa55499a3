"""The built-in rule set."""

from __future__ import annotations

from typing import List

from . import Rule
from .accessibility import accessibility_rules
from .content import content_rules, style_rules
from .documentation import documentation_rules
from .imports import import_rules
from .naming import naming_rules
from .performance import performance_rules
from .react import react_rules
from .structure import structure_rules
from .typescript import typescript_rules


def default_rules() -> List[Rule]:
    """Return the built-in rules in their reporting order."""

    return [
        *structure_rules(),
        *naming_rules(),
        *content_rules(),
        *style_rules(),
        *documentation_rules(),
        *typescript_rules(),
        *react_rules(),
        *import_rules(),
        *performance_rules(),
        *accessibility_rules(),
    ]
