"""Abstract base class for signal sources."""

from abc import ABC, abstractmethod
import logging

from models.schemas.scan_context import ScanContext
from models.schemas.signals import _SignalGroup

logger = logging.getLogger(__name__)


class SignalSource(ABC):
    """Produces one signal group from a ScanContext.

    Subclasses must implement:
        - group: signal group name, also the registry key
        - load(): prepare lookup tables
        - produce(context): return the group's pydantic model, or raise
          SignalUnavailableError when the group cannot be computed
    """

    group: str = ""
    _loaded: bool = False

    def load(self) -> None:
        """Load static data. Called once by the registry."""

    @abstractmethod
    def produce(self, context: ScanContext) -> _SignalGroup:
        """Compute the signal group for one scan."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if not self._loaded:
            logger.info("Loading signal source: %s", self.group)
            self.load()
            self._loaded = True
