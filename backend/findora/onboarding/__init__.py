"""
Seller onboarding — registration, verification documents and the
client-side registration wizard.

Modules:
    registration  — create / fetch a seller profile (server side)
    verification  — store and submit verification documents (server side)
    documents     — file rules and client-side staging, shared by both sides
    wizard        — five-step registration state machine for clients
"""
