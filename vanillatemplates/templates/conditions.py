"""Conditional rendering.

The `if` directive takes a single path, optionally negated:

    <p if="user.admin">...</p>     kept when user.admin is truthy
    <p if="!items">...</p>         kept when items is falsy

Truthiness follows JavaScript rules (see paths.is_truthy), so an empty list
counts as true. There is no expression language beyond the leading `!`.
"""

from enum import Enum
from typing import Any

from vanillatemplates.core import TemplateNode
from vanillatemplates.templates.paths import is_truthy, resolve
from vanillatemplates.templates.variables import is_placeholder


class ConditionOutcome(Enum):
    """What the walker does with a conditional node."""

    DROP = "drop"  # Remove node and subtree
    KEEP = "keep"  # Strip directive, continue with loop/style/attr/...
    UNWRAP = "unwrap"  # Replace node by its children, walked in place


class ConditionEvaluator:
    """Evaluates `[!]path` expressions against a context."""

    @staticmethod
    def parse(expression: str) -> tuple[str, bool]:
        """Split an expression into (path, negated)."""
        expression = expression.strip()
        if expression.startswith("!"):
            return expression[1:].strip(), True
        return expression, False

    def evaluate(self, expression: str, ctx: Any) -> bool:
        """Evaluate an expression.

        Args:
            expression: Path with optional leading "!"
            ctx: Current render context

        Returns:
            True if the node should be rendered
        """
        path, negated = self.parse(expression)
        result = is_truthy(resolve(ctx, path))
        return not result if negated else result


class ConditionalFilter:
    """Decides the fate of an element carrying an `if` directive."""

    def __init__(self, evaluator: ConditionEvaluator | None = None):
        self._evaluator = evaluator or ConditionEvaluator()

    def decide(self, node: TemplateNode, expression: str, ctx: Any) -> ConditionOutcome:
        if not self._evaluator.evaluate(expression, ctx):
            return ConditionOutcome.DROP

        # A <var> carrying `if` is only a host for the condition
        if is_placeholder(node):
            return ConditionOutcome.UNWRAP

        return ConditionOutcome.KEEP
