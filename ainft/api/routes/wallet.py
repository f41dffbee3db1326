"""Wallet state and browser wallet notifications (accountsChanged, chainChanged)."""
from fastapi import APIRouter, Depends, HTTPException

from ainft.api.state import AppState, get_state
from ainft.core.wallet import WalletUnavailableError

router = APIRouter()


def _wallet_to_dict(state: AppState) -> dict:
    session = state.session
    contract = session.contract
    return {
        "chain_id": session.chain_id,
        "account": session.account,
        "contract_address": contract.address if contract is not None else None,
        "network_error": session.network_error,
    }


@router.get("")
def get_wallet(state: AppState = Depends(get_state)):
    """Return network, active account and NFT contract address."""
    return _wallet_to_dict(state)


@router.post("/connect")
def connect(state: AppState = Depends(get_state)):
    """Connect button: request accounts and make the first one active."""
    try:
        state.wallet.on_accounts_changed()
    except WalletUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return _wallet_to_dict(state)


@router.post("/accounts-changed")
def accounts_changed(state: AppState = Depends(get_state)):
    """Browser wallet switched accounts; re-request them from the wallet."""
    try:
        state.wallet.on_accounts_changed()
    except WalletUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return _wallet_to_dict(state)


@router.post("/network-changed")
def network_changed(state: AppState = Depends(get_state)):
    """Browser wallet switched chains; re-resolve network and contract."""
    try:
        state.wallet.on_network_changed()
    except WalletUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return _wallet_to_dict(state)
