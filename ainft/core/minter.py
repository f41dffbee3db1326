"""Mint the hosted image URL as an NFT, paying the fixed fee."""
import logging
from decimal import Decimal

from web3 import Web3

from ainft.config import MINT_FEE_ETH, TX_TIMEOUT_SEC
from ainft.core.contract import UnsupportedNetworkError
from ainft.core.wallet import WalletConnector
from ainft.models.artifacts import MintRequest

logger = logging.getLogger(__name__)


class MintFailedError(Exception):
    """Transaction was mined but reverted."""


class Minter:
    def __init__(
        self,
        wallet: WalletConnector,
        fee_eth: str = MINT_FEE_ETH,
        tx_timeout_sec: float = TX_TIMEOUT_SEC,
    ) -> None:
        self._wallet = wallet
        self._fee_wei = Web3.to_wei(Decimal(fee_eth), "ether")
        self._tx_timeout_sec = tx_timeout_sec

    def check_ready(self) -> None:
        """Raise UnsupportedNetworkError if there is no contract for the current network."""
        session = self._wallet.session
        if session.contract is None:
            raise UnsupportedNetworkError(session.chain_id)

    def mint(self, token_uri: str):
        """Send mint(token_uri) with the fee and wait for the receipt."""
        self.check_ready()
        session = self._wallet.session
        request = MintRequest(token_uri=token_uri, value_wei=self._fee_wei)
        signer = self._wallet.get_signer()
        call = session.contract.functions.mint(request.token_uri)
        tx_hash = signer.send(session.provider, call, request.value_wei)
        logger.info("Mint sent from %s: %s", signer.address, Web3.to_hex(tx_hash))
        receipt = session.provider.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self._tx_timeout_sec
        )
        if receipt["status"] != 1:
            raise MintFailedError(f"Mint transaction {Web3.to_hex(tx_hash)} reverted")
        logger.info("Mint confirmed in block %s", receipt["blockNumber"])
        return receipt
