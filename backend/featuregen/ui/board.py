import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from featuregen.schemas import FeatureDescriptor

logger = logging.getLogger(__name__)


class BoardState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"


@dataclass(frozen=True)
class BoardSnapshot:
    state: BoardState
    sequence: int
    requirements: str = ""
    features: Tuple[FeatureDescriptor, ...] = field(default_factory=tuple)

    @property
    def submit_enabled(self) -> bool:
        return self.state is not BoardState.LOADING

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "sequence": self.sequence,
            "submit_enabled": self.submit_enabled,
            "requirements": self.requirements,
            "features": list(self.features),
        }


class FeatureBoard:
    """
    Displayed UI state: idle -> loading -> done.

    Every submission gets a sequence number from begin(). Only the
    response carrying the latest issued number may update the board;
    replies for superseded submissions are dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = BoardState.IDLE
        self._issued = 0
        self._requirements = ""
        self._features: Tuple[FeatureDescriptor, ...] = ()

    def begin(self, requirements: str = "") -> int:
        with self._lock:
            self._issued += 1
            self._state = BoardState.LOADING
            self._requirements = requirements
            logger.info("[Board] Submission #%d started", self._issued)
            return self._issued

    def complete(self, sequence: int, features: List[FeatureDescriptor]) -> bool:
        with self._lock:
            if not self._is_current(sequence):
                return False
            self._features = tuple(features)
            self._state = BoardState.DONE
            return True

    def fail(self, sequence: int, error: Exception) -> bool:
        with self._lock:
            if not self._is_current(sequence):
                return False
            self._features = ()
            self._state = BoardState.DONE
        logger.error(
            "[Board] Submission #%d failed: %s",
            sequence,
            error,
            exc_info=error,
        )
        return True

    def snapshot(self) -> BoardSnapshot:
        with self._lock:
            return BoardSnapshot(
                state=self._state,
                sequence=self._issued,
                requirements=self._requirements,
                features=self._features,
            )

    def _is_current(self, sequence: int) -> bool:
        if sequence != self._issued:
            logger.info(
                "[Board] Dropping stale response #%d (latest is #%d)",
                sequence,
                self._issued,
            )
            return False
        return True
