from tldsplit.sources.base import BaseSource, SourceResult, SourceStatus
from tldsplit.sources.psl import FileSource, UrlSource, source_for

__all__ = [
    'BaseSource',
    'SourceResult',
    'SourceStatus',
    'FileSource',
    'UrlSource',
    'source_for'
]
