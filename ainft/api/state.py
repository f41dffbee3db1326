"""Shared application state (injected into routes)."""
from ainft.core.contract import ContractBinding
from ainft.core.form_controller import FormController
from ainft.core.image_generator import ImageGenerator
from ainft.core.image_uploader import ImageUploader
from ainft.core.minter import Minter
from ainft.core.wallet import WalletConnector
from ainft.models.session import Session


class AppState:
    def __init__(
        self,
        wallet: WalletConnector | None = None,
        form: FormController | None = None,
    ) -> None:
        self.session = wallet.session if wallet is not None else Session()
        self.wallet = wallet or WalletConnector(self.session, ContractBinding())
        self.form = form or FormController(
            generator=ImageGenerator(),
            uploader=ImageUploader(),
            minter=Minter(self.wallet),
        )


_state: AppState | None = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state
