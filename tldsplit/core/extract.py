"""
TLDExtract: convenience wrapper tying a compiled RuleSet to a MatchEngine.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from tldsplit.core.matcher import DomainParts, MatchEngine
from tldsplit.core.rules import RuleCompiler, RuleSet
from tldsplit.core.utils import extract_host
from tldsplit.exceptions import InvalidSourceError


class TLDExtract:
    """
    Split URLs and hostnames into domain parts.

    Usage:
        extractor = TLDExtract.from_file('public_suffix_list.dat')
        parts = extractor.parse('https://forums.news.cnn.com/')
        parts.root_domain  # 'cnn.com'
    """

    def __init__(
        self,
        ruleset: Optional[RuleSet] = None,
        *,
        text: Union[str, bytes, None] = None,
        frozen: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or logging.getLogger("tldsplit")

        if ruleset is None:
            ruleset = RuleCompiler(frozen=frozen, logger=self.logger).compile(text)

        self.ruleset: RuleSet = ruleset
        self.engine = MatchEngine(ruleset)

    @classmethod
    def from_text(cls, text: Union[str, bytes], frozen: bool = False, **kwargs) -> 'TLDExtract':
        return cls(text=text, frozen=frozen, **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], frozen: bool = False, **kwargs) -> 'TLDExtract':
        """
        Load a public suffix list from disk.

        Raises:
            InvalidSourceError: If the file is missing, unreadable or empty
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise InvalidSourceError(f"cannot read public suffix list {path}: {e}") from e
        return cls(text=data, frozen=frozen, **kwargs)

    def parse(self, url: Optional[str]) -> Optional[DomainParts]:
        """
        Decompose a URL or hostname.

        Returns:
            DomainParts, or None if no host can be extracted or no rule applies
        """
        host = extract_host(url)
        if host is None:
            self.logger.debug(f"No host found in {url!r}")
            return None
        return self.engine.parse(host)

    def freeze(self) -> str:
        """Frozen export of the rule set, loadable with frozen=True"""
        return self.ruleset.dump()

    def __repr__(self):
        return f"<TLDExtract rules={len(self.ruleset)}>"
