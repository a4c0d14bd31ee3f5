import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiohttp

from tldsplit.config import DEFAULT_PSL_URL
from tldsplit.exceptions import SourceError
from tldsplit.sources.base import BaseSource


class FileSource(BaseSource):
    """Public suffix list stored on disk"""

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    async def validate(self) -> bool:
        if not self.path.is_file():
            self.logger.warning(f"{self.path} does not exist or is not a file")
            return False
        return True

    async def fetch(self) -> bytes:
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            raise SourceError(f"cannot read {self.path}: {e}") from e


class UrlSource(BaseSource):
    """Public suffix list downloaded over HTTP(S)"""

    def __init__(
        self,
        url: str = DEFAULT_PSL_URL,
        timeout: float = 30,
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self.url = url
        self.timeout = timeout

    @property
    def name(self) -> str:
        return self.url

    async def fetch(self) -> bytes:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        raise SourceError(f"GET {self.url} returned HTTP {response.status}")
                    return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SourceError(f"GET {self.url} failed: {e}") from e


def source_for(location: str, timeout: float = 30, logger: Optional[logging.Logger] = None) -> BaseSource:
    """Pick a UrlSource for http(s) locations, a FileSource otherwise"""
    if location.lower().startswith(('http://', 'https://')):
        return UrlSource(location, timeout=timeout, logger=logger)
    return FileSource(location, logger=logger)
