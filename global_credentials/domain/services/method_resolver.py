"""Domain service selecting the backend operation for a set of filters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..value_objects import CredentialFilters, RetrievalMethod

logger = logging.getLogger(__name__)


def pick_method(groups: Sequence[Sequence[bool]]) -> int | None:
    """
    Return the 1-based index of the first group with any flag set.

    Groups are evaluated in order, so an earlier group wins when several
    groups have flags set. Returns None when no flag is set at all.
    """
    for index, flags in enumerate(groups, start=1):
        if any(flags):
            return index
    return None


@dataclass(frozen=True, slots=True)
class SelectionRule:
    """A retrieval method together with the presence flags that select it."""

    method: RetrievalMethod
    flags: Callable[[CredentialFilters], Sequence[bool]]


DEFAULT_RULES: tuple[SelectionRule, ...] = (
    SelectionRule(RetrievalMethod.GET_GLOBAL_CREDENTIALS, lambda f: f.list_filter_flags),
    SelectionRule(RetrievalMethod.GET_CREDENTIAL_SUB_TYPE_BY_ID, lambda f: f.lookup_key_flags),
)


class MethodResolver:
    """
    Domain service resolving filters to a retrieval method.

    Rules are tried in declaration order and the first one with any flag set
    wins. With the default rules, supplying both list filters and an id
    selects the list operation and the id is ignored.
    """

    def __init__(self, rules: Sequence[SelectionRule] = DEFAULT_RULES) -> None:
        """Initialize resolver with ordered selection rules."""
        self._rules = tuple(rules)

    def resolve(self, filters: CredentialFilters) -> RetrievalMethod | None:
        """
        Select the retrieval method for the given filters.

        Args:
            filters: Caller supplied filters.

        Returns:
            The selected method, or None when no filter was supplied.
        """
        groups = [list(rule.flags(filters)) for rule in self._rules]
        for rule, flags in zip(self._rules, groups, strict=True):
            logger.debug("Selecting method. %s %s", rule.method, flags)

        selected = pick_method(groups)
        if selected is None:
            return None

        method = self._rules[selected - 1].method
        if sum(1 for flags in groups if any(flags)) > 1:
            logger.debug("Ambiguous filters, %s takes precedence", method)
        logger.debug("Selected method: %s", method)
        return method
