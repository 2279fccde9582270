"""Internal modules for Base44 SDK.

WARNING: This package contains the plumbing behind Base44Client.
These are not intended for direct use in application code.

Modules:
    transport - Request pipeline and token store
    dispatch - Dynamic name-to-endpoint dispatch
    http - Shared HTTP client configuration
    redaction - Credential redaction for debug output
"""
