"""
Public suffix rule compilation.

A raw public suffix list is turned into a RuleSet made of three collections:
exception rules, wildcard rules and a set of plain suffix strings.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple, Union

from tldsplit.core.utils import ascii_compatible_encode
from tldsplit.exceptions import InvalidSourceError

# Stands in for the '*' label of a wildcard rule; never equal to a host label
ANY_LABEL = None

EXCEPTION_MARKER = '!'
WILDCARD_MARKER = '*'
COMMENT_PREFIX = '//'


class RuleKind(Enum):
    """Category of a compiled PSL line"""
    EXCEPTION = "exception"
    WILDCARD = "wildcard"
    NORMAL = "normal"


@dataclass(frozen=True)
class Rule:
    """One compiled PSL line"""
    raw: str
    kind: RuleKind
    labels: Tuple[Optional[str], ...]

    @classmethod
    def from_line(cls, line: str) -> 'Rule':
        """
        Classify a PSL line and split it into labels.

        Args:
            line: '!www.ck', '*.ck', 'co.uk', ...

        Returns:
            Rule with the '!' marker stripped and '*' labels set to ANY_LABEL
        """
        if WILDCARD_MARKER in line:
            kind = RuleKind.WILDCARD
        elif line.startswith(EXCEPTION_MARKER):
            kind = RuleKind.EXCEPTION
        else:
            kind = RuleKind.NORMAL

        body = line[1:] if kind is RuleKind.EXCEPTION else line
        labels = tuple(
            ANY_LABEL if label == WILDCARD_MARKER else label
            for label in body.lower().split('.')
        )
        return cls(raw=line, kind=kind, labels=labels)

    @property
    def suffix(self) -> str:
        """Dot-joined labels, as stored in the normals set"""
        return '.'.join(WILDCARD_MARKER if label is ANY_LABEL else label for label in self.labels)

    def matches(self, host_labels: Sequence[str]) -> bool:
        """
        Compare the rule with the trailing window of the host labels.

        ANY_LABEL matches exactly one host label at its position.
        """
        size = len(self.labels)
        if size == 0 or len(host_labels) < size:
            return False

        window = host_labels[len(host_labels) - size:]
        for rule_label, host_label in zip(self.labels, window):
            if rule_label is ANY_LABEL:
                continue
            if rule_label != host_label.lower():
                return False
        return True


@dataclass(frozen=True)
class RuleSet:
    """Compiled rules. Built once, shared read-only."""
    exceptions: Tuple[Rule, ...] = ()
    wildcards: Tuple[Rule, ...] = ()
    normals: FrozenSet[str] = frozenset()

    def __len__(self) -> int:
        return len(self.exceptions) + len(self.wildcards) + len(self.normals)

    def stats(self) -> Dict[str, int]:
        """Rule counts per category"""
        return {
            RuleKind.EXCEPTION.value: len(self.exceptions),
            RuleKind.WILDCARD.value: len(self.wildcards),
            RuleKind.NORMAL.value: len(self.normals),
        }

    def to_frozen_lines(self) -> List[str]:
        """
        Export the rule set in frozen form.

        Comments are gone and IDNA variants are already materialized, so the
        output must be compiled with RuleCompiler(frozen=True).
        """
        lines = [rule.raw for rule in self.exceptions]
        lines.extend(rule.raw for rule in self.wildcards)
        lines.extend(sorted(self.normals))
        return lines

    def dump(self) -> str:
        return '\n'.join(self.to_frozen_lines()) + '\n'


class RuleCompiler:
    """
    Build a RuleSet from public suffix list text.

    Two modes:
    - raw (default): skip '//' comments and blank lines, and add the IDNA
      encoded variant of every line that has one
    - frozen: input is a previous RuleSet.dump(); only empty lines are skipped
      and nothing is re-encoded
    """

    def __init__(
        self,
        frozen: bool = False,
        encoder: Callable[[str], Optional[str]] = ascii_compatible_encode,
        logger: Optional[logging.Logger] = None
    ):
        self.frozen = frozen
        self.encoder = encoder
        self.logger = logger or logging.getLogger("tldsplit")

    def compile(self, text: Union[str, bytes, None]) -> RuleSet:
        """
        Compile PSL text.

        Args:
            text: PSL content as str, or UTF-8 bytes

        Returns:
            RuleSet

        Raises:
            InvalidSourceError: If text is missing, undecodable or empty
        """
        content = self._decode(text)

        exceptions: List[Rule] = []
        wildcards: List[Rule] = []
        normals: Set[str] = set()

        def add(line: str) -> None:
            rule = Rule.from_line(line)
            if rule.kind is RuleKind.EXCEPTION:
                exceptions.append(rule)
            elif rule.kind is RuleKind.WILDCARD:
                wildcards.append(rule)
            else:
                normals.add(rule.suffix)

        encoded_count = 0
        for line in self._lines(content):
            add(line)

            if self.frozen:
                continue

            encoded = self.encoder(line)
            if encoded and encoded != line:
                add(encoded)
                encoded_count += 1

        ruleset = RuleSet(
            exceptions=tuple(exceptions),
            wildcards=tuple(wildcards),
            normals=frozenset(normals)
        )
        self.logger.debug(
            f"Compiled {len(ruleset)} rules ({ruleset.stats()}), "
            f"{encoded_count} IDNA variants, frozen={self.frozen}"
        )
        return ruleset

    def _decode(self, text: Union[str, bytes, None]) -> str:
        if text is None:
            raise InvalidSourceError("no public suffix list data")

        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode('utf-8')
            except UnicodeDecodeError as e:
                raise InvalidSourceError(f"public suffix list is not valid UTF-8: {e}") from e

        if not isinstance(text, str):
            raise InvalidSourceError(f"public suffix list must be text, got {type(text).__name__}")

        if not text:
            raise InvalidSourceError("public suffix list is empty")

        return text

    def _lines(self, content: str) -> Iterable[str]:
        for line in content.splitlines():
            if self.frozen:
                if not line:
                    continue
                yield line
                continue

            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            yield line
