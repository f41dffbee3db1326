"""Draft, generated image, hosted asset and mint request."""
from dataclasses import dataclass


@dataclass
class SubmissionDraft:
    """Form fields as currently typed."""
    name: str = ""
    description: str = ""

    def is_complete(self) -> bool:
        return self.name != "" and self.description != ""


@dataclass
class GeneratedArtifact:
    """Image returned by the inference API."""
    image_bytes: str  # base64
    mime_type: str

    @property
    def preview_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.image_bytes}"


@dataclass
class HostedAsset:
    """Public URL of the uploaded image; used as the token URI."""
    url: str

    @property
    def link_label(self) -> str:
        return self.url[self.url.rfind("/") + 1:]


@dataclass
class MintRequest:
    token_uri: str
    value_wei: int
