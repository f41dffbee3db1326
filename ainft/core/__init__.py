"""Core services: wallet, contract, image generation/upload, minting, form flow."""
from ainft.core.contract import ContractBinding
from ainft.core.form_controller import FormController
from ainft.core.image_generator import ImageGenerator
from ainft.core.image_uploader import ImageUploader
from ainft.core.minter import Minter
from ainft.core.wallet import WalletConnector

__all__ = [
    "ContractBinding",
    "FormController",
    "ImageGenerator",
    "ImageUploader",
    "Minter",
    "WalletConnector",
]
