"""Command-line registration helper."""

import json

import httpx
import pytest

from findora.onboarding.wizard import RegistrationWizard, WizardPhase
from scripts.register_seller import build_submitter, fill_wizard


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://findora.test")


async def test_submitter_reports_created_profile():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"message": "Seller profile created successfully", "seller": {}})

    async with _client(handler) as client:
        result = await build_submitter(client)({"businessName": "Acme Goods"})

    assert seen == {"path": "/api/seller/register", "body": {"businessName": "Acme Goods"}}
    assert result.ok is True
    assert result.status_code == 201
    assert result.message == "Seller profile created successfully"


async def test_submitter_reports_rejection():
    def handler(request):
        return httpx.Response(409, json={"message": "You already have a seller profile"})

    async with _client(handler) as client:
        result = await build_submitter(client)({})

    assert result.ok is False
    assert result.status_code == 409
    assert result.message == "You already have a seller profile"
    assert result.errors is None


async def test_filled_wizard_submits_through_api_client(registration_answers):
    def handler(request):
        return httpx.Response(201, json={"message": "Seller profile created successfully"})

    async with _client(handler) as client:
        wizard = RegistrationWizard(submitter=build_submitter(client), gate_steps=True)
        fill_wizard(wizard, registration_answers)
        assert await wizard.submit() is True

    assert wizard.phase == WizardPhase.SUCCEEDED
    assert wizard.selected_categories == ["Home & Garden", "Art & Crafts"]


def test_fill_wizard_stops_on_invalid_step(registration_answers):
    registration_answers.pop("phone")

    async def never_called(payload):
        raise AssertionError("should not submit")

    wizard = RegistrationWizard(submitter=never_called, gate_steps=True)

    with pytest.raises(SystemExit) as excinfo:
        fill_wizard(wizard, registration_answers)

    assert "Step 2" in str(excinfo.value)
    assert wizard.current_step == 2
