"""Chain session: provider, network, account and bound contract."""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Session:
    """Owned by AppState and passed to the wallet, contract and minter."""
    provider: Any = None  # web3.Web3
    chain_id: Optional[int] = None
    account: Optional[str] = None  # checksum address
    contract: Any = None  # web3 Contract, None on an unsupported network
    network_error: Optional[str] = None
