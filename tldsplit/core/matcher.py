"""
Hostname decomposition against a compiled RuleSet.
"""
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

from tldsplit.core.rules import Rule, RuleKind, RuleSet
from tldsplit.core.utils import split_labels


@dataclass(frozen=True)
class DomainParts:
    """Result of splitting a hostname. Absent parts are None, never ''."""
    root_domain: Optional[str] = None
    top_level_domain: Optional[str] = None
    second_level_domain: Optional[str] = None
    sub_domain: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def _join(labels: List[str]) -> Optional[str]:
    return '.'.join(labels) if labels else None


def decompose(labels: List[str], suffix_size: int) -> DomainParts:
    """
    Split host labels given how many rightmost labels form the public suffix.

    Args:
        labels: Lowercase host labels, leftmost first
        suffix_size: Number of rightmost labels in the suffix

    Returns:
        DomainParts; root and second level are None when no label is left of
        the suffix
    """
    suffix_size = max(0, min(suffix_size, len(labels)))
    boundary = len(labels) - suffix_size

    suffix = labels[boundary:]
    top_level = _join(suffix)

    if boundary < 1:
        return DomainParts(top_level_domain=top_level)

    second_level = labels[boundary - 1]
    root = _join(labels[boundary - 1:])
    sub = _join(labels[:boundary - 1])

    return DomainParts(
        root_domain=root,
        top_level_domain=top_level,
        second_level_domain=second_level,
        sub_domain=sub
    )


class MatchEngine:
    """
    Resolve hostnames against a RuleSet.

    Exceptions are checked first, then wildcards (first match in list order
    wins, not the longest), then the longest normal suffix.
    """

    def __init__(self, ruleset: RuleSet):
        self.ruleset = ruleset

    def parse(self, host: str) -> Optional[DomainParts]:
        """
        Decompose a hostname.

        Returns:
            DomainParts, or None if no rule covers the host
        """
        return self.resolve_special(host) or self.resolve_normal(host)

    def resolve_special(self, host: str) -> Optional[DomainParts]:
        """Resolve using exception and wildcard rules only."""
        labels = split_labels(host)

        rule = self._first_match(self.ruleset.exceptions, labels)
        if rule is None:
            rule = self._first_match(self.ruleset.wildcards, labels)
        if rule is None:
            return None

        if rule.kind is RuleKind.EXCEPTION:
            # The leftmost exception label belongs to the registrable domain
            return decompose(labels, len(rule.labels) - 1)

        # Wildcard: the matched span is the suffix, reported with the
        # concrete host label that '*' matched
        return decompose(labels, len(rule.labels))

    def resolve_normal(self, host: str) -> Optional[DomainParts]:
        """Resolve using the longest listed normal suffix."""
        labels = split_labels(host)
        if len(labels) < 2:
            return None

        normals = self.ruleset.normals
        for start in range(len(labels)):
            if '.'.join(labels[start:]) in normals:
                break
        else:
            return None

        if start == 0:
            # Host is itself a public suffix: nothing to register
            return DomainParts()

        return decompose(labels, len(labels) - start)

    @staticmethod
    def _first_match(rules: Sequence[Rule], labels: List[str]) -> Optional[Rule]:
        for rule in rules:
            if rule.matches(labels):
                return rule
        return None
