from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging
from enum import Enum


class SourceStatus(Enum):
    """Source fetch status"""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class SourceResult:
    """Outcome of fetching a public suffix list"""
    def __init__(
        self,
        status: SourceStatus,
        data: Optional[bytes] = None,
        error: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.status = status
        self.data = data
        self.error = error
        self.metadata = metadata or {}

    @property
    def ok(self) -> bool:
        return self.status == SourceStatus.SUCCESS

    @property
    def size(self) -> int:
        """Number of bytes fetched"""
        return len(self.data) if self.data else 0

    def __repr__(self):
        return f"<SourceResult status={self.status.value} bytes={self.size}>"


class BaseSource(ABC):
    """
    Base class for places a public suffix list can be read from.

    Subclasses implement:
    - name: Display name of the source
    - fetch: Return the raw list as bytes

    Optional override:
    - validate: Check whether the source can be read at all
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger: logging.Logger = logger or logging.getLogger("tldsplit")
        self._status: SourceStatus = SourceStatus.NOT_STARTED

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source name (e.g. a path or URL)"""
        pass

    @abstractmethod
    async def fetch(self) -> bytes:
        """
        Read the raw list.

        Raises:
            SourceError: If the list cannot be read
        """
        pass

    async def validate(self) -> bool:
        """Return False to skip this source"""
        return True

    async def run(self) -> SourceResult:
        """
        Fetch with the full lifecycle: validate, fetch, report.

        Errors are logged and returned as a FAILED result rather than raised.
        """
        try:
            self._status = SourceStatus.RUNNING

            if not await self.validate():
                self.logger.warning(f"{self.name}: validation failed")
                self._status = SourceStatus.SKIPPED
                return SourceResult(
                    status=SourceStatus.SKIPPED,
                    error="Validation failed",
                    metadata={'source': self.name}
                )

            data = await self.fetch()

            self._status = SourceStatus.SUCCESS
            self.logger.debug(f"{self.name}: fetched {len(data)} bytes")
            return SourceResult(
                status=SourceStatus.SUCCESS,
                data=data,
                metadata={'source': self.name}
            )

        except Exception as e:
            self.logger.error(f"{self.name} failed: {e}")
            self._status = SourceStatus.FAILED
            return SourceResult(
                status=SourceStatus.FAILED,
                error=str(e),
                metadata={'source': self.name}
            )

    @property
    def status(self) -> SourceStatus:
        """Current source status"""
        return self._status

    def __repr__(self):
        return f"<{self.__class__.__name__} status={self._status.value}>"
