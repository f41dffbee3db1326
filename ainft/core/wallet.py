"""Wallet connection: provider, network, active account and signers."""
import logging
from typing import Callable, List, Optional

from eth_account import Account
from web3 import Web3

from ainft.config import HTTP_TIMEOUT_SEC, WALLET_PRIVATE_KEY, WALLET_RPC_URL
from ainft.core.contract import ContractBinding, UnsupportedNetworkError
from ainft.models.session import Session

logger = logging.getLogger(__name__)


class WalletUnavailableError(Exception):
    """The RPC endpoint backing the wallet could not be reached."""


def _http_provider(rpc_url: str) -> Web3:
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": HTTP_TIMEOUT_SEC}))


class LocalSigner:
    """Signs with a private key held by this process and broadcasts the raw tx."""

    def __init__(self, account) -> None:
        self._account = account

    @property
    def address(self) -> str:
        return self._account.address

    def send(self, provider: Web3, call, value_wei: int):
        tx = call.build_transaction(
            {
                "from": self.address,
                "value": value_wei,
                "nonce": provider.eth.get_transaction_count(self.address),
            }
        )
        signed = self._account.sign_transaction(tx)
        return provider.eth.send_raw_transaction(signed.raw_transaction)


class NodeSigner:
    """Lets the node sign for one of its unlocked accounts (eth_sendTransaction)."""

    def __init__(self, address: str) -> None:
        self.address = address

    def send(self, provider: Web3, call, value_wei: int):
        return call.transact({"from": self.address, "value": value_wei})


class WalletConnector:
    """Owns the provider in a Session and keeps account and contract current.

    Account and network notifications from the browser wallet are dispatched
    here as events; each one re-queries the provider rather than trusting the
    event payload.
    """

    def __init__(
        self,
        session: Session,
        binding: ContractBinding,
        rpc_url: str = WALLET_RPC_URL,
        private_key: str = WALLET_PRIVATE_KEY,
        provider_factory: Callable[[str], Web3] = _http_provider,
    ) -> None:
        self._session = session
        self._binding = binding
        self._rpc_url = rpc_url
        self._local_account = Account.from_key(private_key) if private_key else None
        self._provider_factory = provider_factory
        self.listening = False

    @property
    def session(self) -> Session:
        return self._session

    def connect(self) -> Web3:
        """Build the provider, resolve the network and start listening. Fatal on failure."""
        provider = self._provider_factory(self._rpc_url)
        if not provider.is_connected():
            raise WalletUnavailableError(f"No wallet reachable at {self._rpc_url}")
        self._session.provider = provider
        self.on_network_changed()
        # Registered once per process; there is no teardown.
        self.listening = True
        logger.info("Wallet connected: %s (chain %s)", self._rpc_url, self._session.chain_id)
        return provider

    def request_accounts(self) -> List[str]:
        """Accounts the wallet can sign for, first one active."""
        if self._local_account is not None:
            return [self._local_account.address]
        if self._session.provider is None:
            raise WalletUnavailableError("Wallet not connected")
        return list(self._session.provider.eth.accounts)

    def on_accounts_changed(self) -> Optional[str]:
        """Re-request accounts; store the first one in checksum form."""
        accounts = self.request_accounts()
        account = Web3.to_checksum_address(accounts[0]) if accounts else None
        self._session.account = account
        logger.info("Active account: %s", account)
        return account

    def on_network_changed(self) -> Optional[int]:
        """Re-query the chain id and re-derive the contract binding."""
        provider = self._session.provider
        if provider is None:
            raise WalletUnavailableError("Wallet not connected")
        chain_id = provider.eth.chain_id
        self._session.chain_id = chain_id
        try:
            self._session.contract = self._binding.bind(provider, chain_id)
            self._session.network_error = None
        except UnsupportedNetworkError as e:
            self._session.contract = None
            self._session.network_error = str(e)
            logger.warning("%s", e)
        return chain_id

    def get_signer(self):
        """Signer for the active account (first wallet account if none chosen yet)."""
        if self._local_account is not None:
            return LocalSigner(self._local_account)
        account = self._session.account
        if account is None:
            account = self.on_accounts_changed()
        if account is None:
            raise WalletUnavailableError("Wallet has no accounts")
        return NodeSigner(account)
