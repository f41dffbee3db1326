"""Form state machine, per-phase results and the UI snapshot."""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FormState(str, Enum):
    IDLE = "idle"
    GENERATING_IMAGE = "generating_image"
    UPLOADING_IMAGE = "uploading_image"
    MINTING = "minting"
    ERROR = "error"


BUSY_STATES = (FormState.GENERATING_IMAGE, FormState.UPLOADING_IMAGE, FormState.MINTING)


class FailureKind(str, Enum):
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    BAD_RESPONSE = "bad_response"
    UNSUPPORTED_NETWORK = "unsupported_network"
    WALLET_UNAVAILABLE = "wallet_unavailable"
    WALLET_REJECTED = "wallet_rejected"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    CHAIN_ERROR = "chain_error"
    UNEXPECTED = "unexpected"


@dataclass
class Failure:
    kind: FailureKind
    message: str
    phase: Optional[FormState] = None


@dataclass
class PhaseResult(Generic[T]):
    """Outcome of one pipeline phase: a value or a failure, never both."""
    value: Optional[T] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class UIStatus:
    """What the page renders."""
    state: FormState
    busy: bool
    status_message: str
    name: str
    description: str
    preview_data_uri: Optional[str]
    url: Optional[str]
    link_label: Optional[str]
    failure: Optional[Failure]
    can_retry_mint: bool
