"""Wallet connection, account/network events and signers."""
from unittest.mock import MagicMock

import pytest

from ainft.core.contract import ContractBinding
from ainft.core.wallet import LocalSigner, NodeSigner, WalletConnector, WalletUnavailableError
from ainft.models.session import Session

# Hardhat's first default account
HARDHAT_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
NFT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


@pytest.fixture
def provider():
    p = MagicMock()
    p.is_connected.return_value = True
    p.eth.chain_id = 31337
    p.eth.accounts = [HARDHAT_ADDRESS.lower(), "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"]
    return p


@pytest.fixture
def binding():
    return ContractBinding(address_book={"31337": {"nft": {"address": NFT_ADDRESS}}}, abi=[])


def _connector(provider, binding, private_key=""):
    session = Session()
    return WalletConnector(
        session,
        binding,
        rpc_url="http://node.test:8545",
        private_key=private_key,
        provider_factory=lambda url: provider,
    )


def test_connect_resolves_network_and_binds_contract(provider, binding):
    wallet = _connector(provider, binding)

    assert wallet.connect() is provider

    session = wallet.session
    assert session.provider is provider
    assert session.chain_id == 31337
    assert session.contract is provider.eth.contract.return_value
    assert session.network_error is None
    assert wallet.listening is True
    provider.eth.contract.assert_called_once_with(address=NFT_ADDRESS, abi=[])


def test_connect_without_wallet_is_fatal(provider, binding):
    provider.is_connected.return_value = False
    wallet = _connector(provider, binding)

    with pytest.raises(WalletUnavailableError):
        wallet.connect()
    assert wallet.session.provider is None
    assert wallet.listening is False


def test_accounts_changed_stores_first_account_checksummed(provider, binding):
    wallet = _connector(provider, binding)
    wallet.connect()

    assert wallet.on_accounts_changed() == HARDHAT_ADDRESS
    assert wallet.session.account == HARDHAT_ADDRESS

    provider.eth.accounts = []
    assert wallet.on_accounts_changed() is None
    assert wallet.session.account is None


def test_network_change_to_unknown_chain_is_recoverable(provider, binding):
    wallet = _connector(provider, binding)
    wallet.connect()

    provider.eth.chain_id = 5
    assert wallet.on_network_changed() == 5
    assert wallet.session.contract is None
    assert "5" in wallet.session.network_error

    provider.eth.chain_id = 31337
    wallet.on_network_changed()
    assert wallet.session.contract is not None
    assert wallet.session.network_error is None


def test_events_before_connect_raise(provider, binding):
    wallet = _connector(provider, binding)

    with pytest.raises(WalletUnavailableError):
        wallet.on_network_changed()
    with pytest.raises(WalletUnavailableError):
        wallet.on_accounts_changed()


def test_node_signer_uses_first_account(provider, binding):
    wallet = _connector(provider, binding)
    wallet.connect()

    signer = wallet.get_signer()

    assert isinstance(signer, NodeSigner)
    assert signer.address == HARDHAT_ADDRESS
    call = MagicMock()
    signer.send(provider, call, 10**18)
    call.transact.assert_called_once_with({"from": HARDHAT_ADDRESS, "value": 10**18})


def test_no_accounts_means_no_signer(provider, binding):
    provider.eth.accounts = []
    wallet = _connector(provider, binding)
    wallet.connect()

    with pytest.raises(WalletUnavailableError):
        wallet.get_signer()


def test_private_key_wallet_signs_locally(provider, binding):
    wallet = _connector(provider, binding, private_key=HARDHAT_KEY)
    wallet.connect()

    assert wallet.request_accounts() == [HARDHAT_ADDRESS]
    signer = wallet.get_signer()
    assert isinstance(signer, LocalSigner)
    assert signer.address == HARDHAT_ADDRESS

    provider.eth.get_transaction_count.return_value = 0
    call = MagicMock()
    call.build_transaction.return_value = {
        "from": HARDHAT_ADDRESS,
        "to": NFT_ADDRESS,
        "value": 10**18,
        "gas": 200000,
        "maxFeePerGas": 2 * 10**9,
        "maxPriorityFeePerGas": 10**9,
        "nonce": 0,
        "chainId": 31337,
        "data": "0x",
    }
    signer.send(provider, call, 10**18)

    call.build_transaction.assert_called_once_with({"from": HARDHAT_ADDRESS, "value": 10**18, "nonce": 0})
    provider.eth.send_raw_transaction.assert_called_once()
    raw = provider.eth.send_raw_transaction.call_args.args[0]
    assert bytes(raw)[0] == 2  # EIP-1559 typed transaction
