"""NFT contract handle per network, from the static address book and ABI."""
import json
from pathlib import Path
from typing import Optional

from web3 import Web3

from ainft.config import ADDRESS_BOOK_PATH, NFT_ABI_PATH


class UnsupportedNetworkError(Exception):
    """No NFT contract is deployed on the given chain id."""

    def __init__(self, chain_id: Optional[int]) -> None:
        super().__init__(f"No NFT contract configured for network {chain_id}")
        self.chain_id = chain_id


def load_address_book(path: Path = ADDRESS_BOOK_PATH) -> dict:
    """Load {chain_id: {"nft": {"address": ...}}} from JSON."""
    return json.loads(Path(path).read_text())


def load_abi(path: Path = NFT_ABI_PATH) -> list:
    return json.loads(Path(path).read_text())


class ContractBinding:
    """Resolves the NFT contract address for a chain id and builds the handle."""

    def __init__(self, address_book: Optional[dict] = None, abi: Optional[list] = None) -> None:
        self._address_book = address_book if address_book is not None else load_address_book()
        self._abi = abi if abi is not None else load_abi()

    def resolve_address(self, chain_id: int) -> str:
        """Return checksum address of the NFT contract, or raise UnsupportedNetworkError."""
        entry = self._address_book.get(str(chain_id)) or {}
        address = (entry.get("nft") or {}).get("address")
        if not address:
            raise UnsupportedNetworkError(chain_id)
        return Web3.to_checksum_address(address)

    def bind(self, provider: Web3, chain_id: int):
        """Contract handle for reads; writes go through a signer (see Minter)."""
        return provider.eth.contract(address=self.resolve_address(chain_id), abi=self._abi)
