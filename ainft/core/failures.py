"""Map exceptions raised by a pipeline phase to a user-visible Failure."""
import httpx
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception

from ainft.core.contract import UnsupportedNetworkError
from ainft.core.image_uploader import UploadResponseError
from ainft.core.minter import MintFailedError
from ainft.core.wallet import WalletUnavailableError
from ainft.models.form import Failure, FailureKind, FormState

_REJECTED_MARKERS = ("user rejected", "user denied", "rejected by user")


def _rpc_kind(message: str) -> FailureKind:
    lowered = message.lower()
    if "insufficient funds" in lowered:
        return FailureKind.INSUFFICIENT_FUNDS
    if any(m in lowered for m in _REJECTED_MARKERS):
        return FailureKind.WALLET_REJECTED
    return FailureKind.CHAIN_ERROR


def classify(exc: Exception, phase: FormState | None = None) -> Failure:
    """Return a Failure with kind and message for exc."""
    if isinstance(exc, UnsupportedNetworkError):
        kind = FailureKind.UNSUPPORTED_NETWORK
    elif isinstance(exc, WalletUnavailableError):
        kind = FailureKind.WALLET_UNAVAILABLE
    elif isinstance(exc, UploadResponseError):
        kind = FailureKind.BAD_RESPONSE
    elif isinstance(exc, MintFailedError):
        kind = FailureKind.CHAIN_ERROR
    elif isinstance(exc, httpx.HTTPStatusError):
        return Failure(
            kind=FailureKind.HTTP_ERROR,
            message=f"{exc.request.url.host} returned HTTP {exc.response.status_code}",
            phase=phase,
        )
    elif isinstance(exc, (httpx.TimeoutException, TimeExhausted)):
        kind = FailureKind.TIMEOUT
    elif isinstance(exc, httpx.TransportError):
        kind = FailureKind.NETWORK_ERROR
    elif isinstance(exc, ContractLogicError):
        kind = FailureKind.CHAIN_ERROR
    elif isinstance(exc, (Web3Exception, ValueError)):
        kind = _rpc_kind(str(exc))
    elif isinstance(exc, OSError):
        kind = FailureKind.NETWORK_ERROR
    else:
        kind = FailureKind.UNEXPECTED
    return Failure(kind=kind, message=str(exc) or type(exc).__name__, phase=phase)
