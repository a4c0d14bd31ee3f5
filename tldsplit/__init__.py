from tldsplit.core.extract import TLDExtract
from tldsplit.core.matcher import DomainParts, MatchEngine
from tldsplit.core.rules import ANY_LABEL, Rule, RuleCompiler, RuleKind, RuleSet
from tldsplit.exceptions import ConfigError, InvalidSourceError, SourceError, TLDSplitError

__version__ = '0.1.0'

__all__ = [
    'TLDExtract',
    'DomainParts',
    'MatchEngine',
    'ANY_LABEL',
    'Rule',
    'RuleCompiler',
    'RuleKind',
    'RuleSet',
    'ConfigError',
    'InvalidSourceError',
    'SourceError',
    'TLDSplitError'
]
