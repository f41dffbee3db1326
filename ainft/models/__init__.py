"""Data models for the chain session, the form draft and pipeline results."""
from ainft.models.artifacts import GeneratedArtifact, HostedAsset, MintRequest, SubmissionDraft
from ainft.models.form import Failure, FailureKind, FormState, PhaseResult, UIStatus
from ainft.models.session import Session

__all__ = [
    "Session",
    "SubmissionDraft",
    "GeneratedArtifact",
    "HostedAsset",
    "MintRequest",
    "FormState",
    "Failure",
    "FailureKind",
    "PhaseResult",
    "UIStatus",
]
