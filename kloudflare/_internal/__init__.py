"""Internal modules for Kloudflare SDK.

These are not intended for direct use in application code.

Modules:
    http - Transport protocol and the httpx-backed implementation
    redaction - Credential masking for debug output
"""
