#!/usr/bin/env python3
"""
Register a seller against a running API from a JSON answers file.

Drives the same five-step wizard a front end would, stepping through with
per-step checks, then uploads verification documents and submits them.

Usage (from backend/):
    python -m scripts.register_seller answers.json \
        --email buyer@findora.dev --password buyer12345 \
        --document ID_FRONT=./id-front.png --document ID_BACK=./id-back.png
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import httpx

from findora.core.errors import AppError
from findora.core.logging import get_logger, setup_logging
from findora.onboarding.documents import DocumentStaging, StagedDocument
from findora.onboarding.wizard import REGISTRATION_STEPS, RegistrationWizard, SubmissionResult, Submitter

logger = get_logger("register_seller")


def build_submitter(client: httpx.AsyncClient) -> Submitter:
    """Submitter posting the wizard payload to ``/api/seller/register``."""

    async def submit(payload: dict[str, Any]) -> SubmissionResult:
        response = await client.post("/api/seller/register", json=payload)
        body = response.json() if response.content else {}
        return SubmissionResult(
            ok=response.status_code == 201,
            status_code=response.status_code,
            message=body.get("message", ""),
            errors=body.get("errors"),
        )

    return submit


async def login(client: httpx.AsyncClient, email: str, password: str) -> str:
    response = await client.post("/api/auth/login", json={"username": email, "password": password})
    response.raise_for_status()
    return response.json()["access_token"]


async def upload_documents(client: httpx.AsyncClient, staged: list[StagedDocument]) -> dict[str, Any]:
    for document in staged:
        with document.path.open("rb") as handle:
            response = await client.put(
                f"/api/seller/documents/{document.document_type.value}",
                files={"file": (document.filename, handle, document.content_type)},
            )
        response.raise_for_status()
        logger.info("Document uploaded", document_type=document.document_type.value, filename=document.filename)

    response = await client.post("/api/seller/documents/submit")
    response.raise_for_status()
    return response.json()


def fill_wizard(wizard: RegistrationWizard, answers: dict[str, Any]) -> None:
    """Walk every step, stopping at the first one with errors."""
    for step in REGISTRATION_STEPS:
        values = {name: answers[name] for name in step.fields if name in answers}
        categories = values.pop("productCategories", None)
        wizard.update(**values)
        for category in categories or []:
            wizard.toggle_category(category)

        if step.number == len(REGISTRATION_STEPS):
            break
        if not wizard.next():
            raise SystemExit(f"Step {step.number} ({step.title}) has errors: {json.dumps(wizard.errors)}")


def parse_documents(values: list[str]) -> DocumentStaging:
    staging = DocumentStaging()
    for value in values:
        document_type, _, path = value.partition("=")
        staging.stage_path(document_type, Path(path))
    return staging


async def run(args: argparse.Namespace) -> int:
    answers = json.loads(Path(args.answers).read_text(encoding="utf-8"))
    staging = parse_documents(args.document)
    staged = staging.ensure_complete() if args.document else []

    async with httpx.AsyncClient(base_url=args.base_url, timeout=30.0) as client:
        token = await login(client, args.email, args.password)
        client.headers["Authorization"] = f"Bearer {token}"

        wizard = RegistrationWizard(submitter=build_submitter(client), gate_steps=True)
        fill_wizard(wizard, answers)
        if not await wizard.submit():
            logger.error("Registration failed", message=wizard.message, errors=wizard.errors)
            return 1
        logger.info("Registration succeeded", message=wizard.message)

        if staged:
            result = await upload_documents(client, staged)
            logger.info("Documents submitted", message=result["message"])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a Findora seller from a JSON answers file.")
    parser.add_argument("answers", help="JSON file keyed by camelCase form field names")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument(
        "--document",
        action="append",
        default=[],
        metavar="TYPE=PATH",
        help="Verification document to upload, e.g. ID_FRONT=./front.png (repeatable)",
    )
    args = parser.parse_args(argv)

    setup_logging("INFO")
    try:
        return asyncio.run(run(args))
    except AppError as exc:
        logger.error("Document check failed", message=exc.message)
        return 1
    except httpx.HTTPError as exc:
        logger.error("Request failed", error=str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
