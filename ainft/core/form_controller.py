"""Form state machine: generate -> upload -> mint, one submission at a time."""
import logging
import threading
from typing import Callable, Optional

from ainft.core.failures import classify
from ainft.models.artifacts import GeneratedArtifact, HostedAsset, SubmissionDraft
from ainft.models.form import (
    BUSY_STATES,
    Failure,
    FailureKind,
    FormState,
    PhaseResult,
    UIStatus,
)

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    FormState.GENERATING_IMAGE: "Generating Image...",
    FormState.UPLOADING_IMAGE: "Uploading Image...",
    FormState.MINTING: "Waiting for Mint...",
}


class DraftValidationError(Exception):
    """Name or description is empty."""


class BusyError(Exception):
    """A submission is already in flight."""


class NothingToRetryError(Exception):
    """No failed mint with an uploaded image to retry."""


class FormController:
    """Owns the draft and UI status; runs the pipeline on a background thread.

    Each phase returns a PhaseResult. The first failure moves the form to
    ERROR with the failure kept for display and the draft left untouched, so
    the user can submit again. A failed mint keeps the uploaded image so
    retry_mint() can mint it without regenerating.
    """

    def __init__(self, generator, uploader, minter, background: bool = True) -> None:
        self._generator = generator
        self._uploader = uploader
        self._minter = minter
        self._background = background
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

        self._state = FormState.IDLE
        self._status_message = ""
        self._draft = SubmissionDraft()
        self._artifact: Optional[GeneratedArtifact] = None
        self._asset: Optional[HostedAsset] = None
        self._failure: Optional[Failure] = None

    @property
    def state(self) -> FormState:
        with self._lock:
            return self._state

    @property
    def draft(self) -> SubmissionDraft:
        with self._lock:
            return SubmissionDraft(self._draft.name, self._draft.description)

    def update_draft(self, name: str | None = None, description: str | None = None) -> SubmissionDraft:
        """Field edits. Inputs are disabled while busy."""
        with self._lock:
            if self._state in BUSY_STATES:
                raise BusyError("Submission in progress")
            self._draft = SubmissionDraft(
                name=self._draft.name if name is None else name,
                description=self._draft.description if description is None else description,
            )
            return SubmissionDraft(self._draft.name, self._draft.description)

    def submit(self) -> None:
        """Validate the draft and start the pipeline.

        Raises BusyError, DraftValidationError or UnsupportedNetworkError
        before anything changes.
        """
        with self._lock:
            if self._state in BUSY_STATES:
                raise BusyError("Submission in progress")
            if not self._draft.is_complete():
                raise DraftValidationError("Please provide a name and description")
            self._minter.check_ready()
            draft = SubmissionDraft(self._draft.name, self._draft.description)
            self._artifact = None
            self._asset = None
            self._failure = None
            self._enter(FormState.GENERATING_IMAGE)
        logger.info("Submission started: %r", draft.name)
        self._start(self._run_pipeline, draft)

    def retry_mint(self) -> None:
        """Mint the already-uploaded image again after a failed mint."""
        with self._lock:
            if self._state in BUSY_STATES:
                raise BusyError("Submission in progress")
            failure = self._failure
            if (
                self._state != FormState.ERROR
                or failure is None
                or failure.phase != FormState.MINTING
                or self._asset is None
            ):
                raise NothingToRetryError("No failed mint to retry")
            self._minter.check_ready()
            asset = self._asset
            self._failure = None
            self._enter(FormState.MINTING)
        logger.info("Retrying mint for %s", asset.url)
        self._start(self._run_mint, asset)

    def join(self, timeout: float | None = None) -> None:
        """Wait for the background run, if any."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout=timeout)

    def snapshot(self) -> UIStatus:
        with self._lock:
            return UIStatus(
                state=self._state,
                busy=self._state in BUSY_STATES,
                status_message=self._status_message,
                name=self._draft.name,
                description=self._draft.description,
                preview_data_uri=self._artifact.preview_data_uri if self._artifact else None,
                url=self._asset.url if self._asset else None,
                link_label=self._asset.link_label if self._asset else None,
                failure=self._failure,
                can_retry_mint=(
                    self._state == FormState.ERROR
                    and self._failure is not None
                    and self._failure.phase == FormState.MINTING
                    and self._asset is not None
                ),
            )

    # Called with self._lock held
    def _enter(self, state: FormState) -> None:
        self._state = state
        self._status_message = STATUS_MESSAGES.get(state, "")

    def _start(self, target: Callable, *args) -> None:
        if not self._background:
            target(*args)
            return
        self._thread = threading.Thread(target=target, args=args, daemon=True)
        self._thread.start()

    def _run_phase(self, state: FormState, fn: Callable, *args) -> PhaseResult:
        with self._lock:
            self._enter(state)
        logger.info("Phase: %s", state.value)
        try:
            return PhaseResult(value=fn(*args))
        except Exception as e:
            failure = classify(e, phase=state)
            if failure.kind == FailureKind.UNEXPECTED:
                logger.exception("Phase %s failed", state.value)
            else:
                logger.warning("Phase %s failed (%s): %s", state.value, failure.kind.value, failure.message)
            return PhaseResult(failure=failure)

    def _fail(self, failure: Failure) -> None:
        with self._lock:
            self._state = FormState.ERROR
            self._status_message = failure.message
            self._failure = failure

    def _run_pipeline(self, draft: SubmissionDraft) -> None:
        generated = self._run_phase(
            FormState.GENERATING_IMAGE, self._generator.generate, draft.description
        )
        if not generated.ok:
            self._fail(generated.failure)
            return
        with self._lock:
            self._artifact = generated.value

        uploaded = self._run_phase(
            FormState.UPLOADING_IMAGE,
            self._uploader.upload,
            generated.value.image_bytes,
            draft.name,
        )
        if not uploaded.ok:
            self._fail(uploaded.failure)
            return
        with self._lock:
            self._asset = uploaded.value

        self._run_mint(uploaded.value)

    def _run_mint(self, asset: HostedAsset) -> None:
        minted = self._run_phase(FormState.MINTING, self._minter.mint, asset.url)
        if not minted.ok:
            self._fail(minted.failure)
            return
        with self._lock:
            self._state = FormState.IDLE
            self._status_message = ""
            self._draft = SubmissionDraft()
        logger.info("Minted %s", asset.url)
