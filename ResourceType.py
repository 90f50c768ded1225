"""Resource type lookup for AWS key ID prefixes.

Only the newer four-letter prefixes beginning with "A" are known here.
See https://docs.aws.amazon.com/IAM/latest/UserGuide/reference_identifiers.html#identifiers-prefixes
"""
from types import MappingProxyType
from typing import Optional

PREFIX_LENGTH = 4
LEGACY_PREFIX_CHARS = ("I", "J")

RESOURCE_TYPES = MappingProxyType({
    "ABIA": "AWS STS service bearer token",
    "ACCA": "Context-specific credential",
    "AGPA": "User group",
    "AIDA": "IAM user",
    "AIPA": "Amazon EC2 instance profile",
    "AKIA": "Access key",
    "ANPA": "Managed policy",
    "ANVA": "Version in a managed policy",
    "APKA": "Public key",
    "AROA": "Role",
    "ASCA": "Certificate",
    "ASIA": "Temporary (AWS STS) access key IDs",
})

def get_prefix(key_id: str) -> Optional[str]:
    key_id = key_id.strip()
    if len(key_id) < PREFIX_LENGTH:
        return None
    return key_id[:PREFIX_LENGTH].upper()

def classify(key_id: str) -> Optional[str]:
    """Return the resource type label for the key ID prefix, or None if unknown."""
    prefix = get_prefix(key_id)
    if prefix is None:
        return None
    return RESOURCE_TYPES.get(prefix)

def is_legacy_prefix(key_id: str) -> bool:
    # older key IDs start with I or J and use a different bit layout
    return key_id.strip().upper().startswith(LEGACY_PREFIX_CHARS)
