"""
Form session state machine shared by the category and branch forms.

States: idle -> editing -> submitting -> idle (success) | editing (failure).
Validation runs synchronously against the synchronizer's current snapshot
before any request is sent.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from ..config import logger as log
from ..constants.messages import Messages
from ..domain.result import SubmitResult
from ..errors import RemoteFailure, ValidationFailure
from ..sync.list_state import ListSynchronizer
from ..ui.notifier import Notifier

E = TypeVar("E")
D = TypeVar("D", bound=BaseModel)


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FormSession(ABC, Generic[E, D]):
    """Draft lifecycle for one entity type.

    Subclasses define the draft model, the required fields, the uniqueness
    rule and the texts shown on each outcome.
    """

    draft_cls: type
    context: str = "form"

    required_fields: tuple = ()
    required_message: str = ""
    conflict_field: str = ""
    conflict_message: str = ""

    created_message: str = ""
    updated_message: str = ""
    create_failed_message: str = ""
    update_failed_message: str = ""

    def __init__(self, repository, synchronizer: ListSynchronizer, notifier: Notifier):
        self._repository = repository
        self._synchronizer = synchronizer
        self._notifier = notifier
        self._state = FormState.IDLE
        self._mode: Optional[FormMode] = None
        self._editing: Optional[E] = None
        self.draft: D = self.draft_cls()

    # -----------------------------------------------------------------
    # State
    # -----------------------------------------------------------------

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def mode(self) -> Optional[FormMode]:
        return self._mode

    @property
    def editing(self) -> Optional[E]:
        """The entity being edited, in edit mode."""
        return self._editing

    @property
    def is_open(self) -> bool:
        return self._state is not FormState.IDLE

    @property
    def can_submit(self) -> bool:
        """False while a request is in flight; front ends disable submit."""
        return self._state is FormState.EDITING

    def open_create(self) -> None:
        """Opens the form with an empty draft."""
        if self._state is FormState.SUBMITTING:
            log.warn(self.context, "open_create ignored while submitting")
            return
        self._mode = FormMode.CREATE
        self._editing = None
        self.draft = self.draft_cls()
        self._state = FormState.EDITING
        log.debug(self.context, "opened", mode=self._mode.value)

    def open_edit(self, entity: E) -> None:
        """Opens the form with a draft seeded from ``entity``."""
        if self._state is FormState.SUBMITTING:
            log.warn(self.context, "open_edit ignored while submitting")
            return
        self._mode = FormMode.EDIT
        self._editing = entity
        self.draft = self.draft_cls.from_entity(entity)
        self._state = FormState.EDITING
        log.debug(self.context, "opened", mode=self._mode.value, id=entity.id)

    def set_field(self, name: str, value: str) -> None:
        """Edits one draft field.

        Raises:
            ValueError: If the form is not open or the field does not exist.
        """
        if self._state is not FormState.EDITING:
            raise ValueError(f"Cannot edit draft in state {self._state.value}")
        if name not in self.draft_cls.model_fields:
            raise ValueError(f"Unknown field: {name}")
        setattr(self.draft, name, value)

    def cancel(self) -> None:
        """Closes the form and discards the draft."""
        if self._state is FormState.SUBMITTING:
            log.warn(self.context, "cancel ignored while submitting")
            return
        self._reset()

    def _reset(self) -> None:
        self._state = FormState.IDLE
        self._mode = None
        self._editing = None
        self.draft = self.draft_cls()

    # -----------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------

    @abstractmethod
    def conflicts(self, draft: D, other: E) -> bool:
        """True if ``other`` already holds the draft's unique key."""
        pass

    def validate(self) -> None:
        """Checks required fields, then uniqueness against the loaded list.

        Raises:
            ValidationFailure: On the first failing rule.
        """
        for field in self.required_fields:
            if not getattr(self.draft, field).strip():
                raise ValidationFailure(self.required_message, field=field)

        own_id = self._editing.id if self._editing is not None else None
        for other in self._synchronizer.items:
            if other.id == own_id:
                continue
            if self.conflicts(self.draft, other):
                raise ValidationFailure(self.conflict_message, field=self.conflict_field)

    # -----------------------------------------------------------------
    # Submission
    # -----------------------------------------------------------------

    async def submit(self) -> SubmitResult:
        """Validates the draft and sends it.

        Never raises RemoteFailure or ValidationFailure; both are reported
        through the notifier and returned as a typed result.
        """
        if self._state is FormState.SUBMITTING:
            return SubmitResult.rejected(Messages.SUBMIT_IN_PROGRESS)
        if self._state is FormState.IDLE:
            return SubmitResult.rejected(Messages.FORM_NOT_OPEN)

        try:
            self.validate()
        except ValidationFailure as e:
            log.debug(self.context, "validation failed", field=e.field, reason=e.message)
            self._notifier.error(e.message)
            return SubmitResult.validation_error(e.message, field=e.field)

        creating = self._mode is FormMode.CREATE
        self._state = FormState.SUBMITTING
        try:
            if creating:
                entity = await self._repository.create(self.draft)
            else:
                entity = await self._repository.update(self._editing.id, self.draft)
        except RemoteFailure as e:
            message = self.create_failed_message if creating else self.update_failed_message
            log.error(self.context, message, error=e)
            self._notifier.error(message)
            return SubmitResult.remote_error(message)
        finally:
            if self._state is FormState.SUBMITTING:
                self._state = FormState.EDITING

        if creating:
            self._synchronizer.apply_create(entity)
            message = self.created_message
        else:
            self._synchronizer.apply_update(entity)
            message = self.updated_message
        self._reset()
        self._notifier.success(message)
        log.info(self.context, message, id=entity.id)
        return SubmitResult.success(entity, message)
