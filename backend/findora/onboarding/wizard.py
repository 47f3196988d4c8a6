"""
RegistrationWizard — client-side controller for the five-step seller form.

State is explicit: a phase (EDITING, SUBMITTING, SUCCEEDED, FAILED) plus the
current step index.  Form data accumulates in camelCase keys, exactly as it
will be posted to ``POST /api/seller/register``.

Navigation is lenient by default: "next" advances without checking the
current step, and every field is checked when the form is submitted.  Pass
``gate_steps=True`` to refuse advancing while the current step has errors.
Either way `submit()` validates the full payload with the same schema the
API uses, so skipping steps cannot get an incomplete payload onto the wire.

Usage::

    wizard = RegistrationWizard(submitter=post_registration)
    wizard.update(businessName="Acme", businessType="LLC")
    wizard.next()
    ...
    ok = await wizard.submit()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from findora.api.schemas.seller import SellerRegistrationRequest
from findora.core.constants import PRODUCT_CATEGORIES
from findora.core.errors import flatten_errors
from findora.core.logging import get_logger

logger = get_logger(__name__)


class WizardPhase(StrEnum):
    EDITING = "EDITING"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class WizardStep:
    number: int
    title: str
    fields: tuple[str, ...]


REGISTRATION_STEPS: tuple[WizardStep, ...] = (
    WizardStep(1, "Business Info", (
        "businessName", "businessType", "description", "website", "businessEmail",
    )),
    WizardStep(2, "Contact & Address", (
        "contactPersonName", "phone", "addressLine1", "addressLine2", "city", "state",
        "country", "postalCode", "facebookUrl", "instagramUrl", "linkedinUrl", "twitterUrl",
    )),
    WizardStep(3, "Legal & Tax", (
        "taxId", "gstVatNumber", "businessLicense", "yearsInBusiness",
    )),
    WizardStep(4, "Payment & Categories", (
        "bankAccountHolder", "bankName", "accountNumber", "ifscSwiftCode",
        "bankBranchAddress", "productCategories", "managesOwnShipping", "needsShippingHelp",
    )),
    WizardStep(5, "Review & Submit", ("termsAccepted",)),
)

_KNOWN_FIELDS = frozenset(name for step in REGISTRATION_STEPS for name in step.fields)


@dataclass
class SubmissionResult:
    """What the submitter reports back after posting the payload."""

    ok: bool
    status_code: int | None = None
    message: str = ""
    errors: dict[str, Any] | None = None


Submitter = Callable[[dict[str, Any]], Awaitable[SubmissionResult]]


class WizardTransitionError(RuntimeError):
    """The requested move is not allowed from the current state."""


@dataclass
class RegistrationWizard:
    submitter: Submitter
    gate_steps: bool = False
    current_step: int = 1
    phase: WizardPhase = WizardPhase.EDITING
    data: dict[str, Any] = field(default_factory=lambda: {
        "managesOwnShipping": True,
        "needsShippingHelp": False,
        "productCategories": [],
    })
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str = ""
    result: SubmissionResult | None = None

    # ─── Form data ──────────────────────────────
    @property
    def step(self) -> WizardStep:
        return REGISTRATION_STEPS[self.current_step - 1]

    def update(self, **values: Any) -> None:
        """Set form fields by their camelCase names."""
        self._ensure_editable()
        unknown = set(values) - _KNOWN_FIELDS
        if unknown:
            raise KeyError(f"Unknown registration field(s): {', '.join(sorted(unknown))}")
        self.data.update(values)
        for name in values:
            self.errors.pop(name, None)

    def toggle_category(self, category: str) -> list[str]:
        """Add `category` if absent, remove it if present."""
        self._ensure_editable()
        if category not in PRODUCT_CATEGORIES:
            raise ValueError(f"Unknown product category: {category}")
        selected: list[str] = list(self.data.get("productCategories") or [])
        if category in selected:
            selected = [name for name in selected if name != category]
        else:
            selected.append(category)
        self.data["productCategories"] = selected
        self.errors.pop("productCategories", None)
        return selected

    @property
    def selected_categories(self) -> list[str]:
        return list(self.data.get("productCategories") or [])

    # ─── Validation ─────────────────────────────
    def validate(self) -> dict[str, list[str]]:
        """Field errors for the whole form (empty when valid)."""
        try:
            SellerRegistrationRequest.model_validate(self.data)
        except ValidationError as exc:
            return flatten_errors(exc.errors())["fieldErrors"]
        return {}

    def step_errors(self, number: int | None = None) -> dict[str, list[str]]:
        """Field errors restricted to one step (default: the current one)."""
        step = REGISTRATION_STEPS[(number or self.current_step) - 1]
        return {name: messages for name, messages in self.validate().items() if name in step.fields}

    # ─── Navigation ─────────────────────────────
    def next(self) -> bool:
        """Advance one step.  Returns False when gating kept us in place."""
        self._ensure_editable()
        if self.current_step >= len(REGISTRATION_STEPS):
            raise WizardTransitionError("Already on the last step")
        if self.gate_steps:
            blocking = self.step_errors()
            if blocking:
                self.errors.update(blocking)
                return False
        self.current_step += 1
        return True

    def back(self) -> None:
        self._ensure_editable()
        if self.current_step <= 1:
            raise WizardTransitionError("Already on the first step")
        self.current_step -= 1

    # ─── Submission ─────────────────────────────
    async def submit(self) -> bool:
        """
        Validate everything and post the payload once.

        Returns True on success.  Validation errors leave the wizard where
        it is with `errors` filled in; a rejected request moves it to FAILED,
        from where the user can edit and submit again.
        """
        self._ensure_editable()
        if self.current_step != len(REGISTRATION_STEPS):
            raise WizardTransitionError("Submit is only available on the last step")

        errors = self.validate()
        if errors:
            self.errors = errors
            self.message = "Please fix the highlighted fields"
            return False

        self.errors = {}
        self.message = ""
        self.phase = WizardPhase.SUBMITTING
        try:
            result = await self.submitter(self.payload())
        except Exception:
            self.phase = WizardPhase.FAILED
            self.message = "An error occurred. Please try again."
            raise

        self.result = result
        if result.ok:
            self.phase = WizardPhase.SUCCEEDED
            self.message = result.message or "Seller profile created successfully"
            logger.info("Seller registration submitted", status_code=result.status_code)
            return True

        self.phase = WizardPhase.FAILED
        self.message = result.message or "Something went wrong"
        if result.errors:
            self.errors = dict(result.errors.get("fieldErrors") or {})
        logger.warning("Seller registration rejected", status_code=result.status_code, message=self.message)
        return False

    def payload(self) -> dict[str, Any]:
        return dict(self.data)

    def _ensure_editable(self) -> None:
        if self.phase == WizardPhase.SUBMITTING:
            raise WizardTransitionError("A submission is already in flight")
        if self.phase == WizardPhase.SUCCEEDED:
            raise WizardTransitionError("Registration has already been submitted")
        if self.phase == WizardPhase.FAILED:
            self.phase = WizardPhase.EDITING
