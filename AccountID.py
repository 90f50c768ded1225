"""Recover the AWS account ID embedded in an AWS key ID.

The characters after the four-letter prefix are base32 text (A-Z, 2-7, no
padding). The first six decoded bytes hold the account ID in bits 7..46.
Works for key IDs with prefixes beginning with "A" only.

Based on Tal Be'ery's note on AWS key IDs:
https://medium.com/@TalBeerySec/a-short-note-on-aws-key-id-f88cc4317489
"""
import Message

PREFIX_LENGTH = 4
MIN_KEY_ID_LENGTH = 14
ACCOUNT_ID_BYTES = 6
ACCOUNT_ID_MASK = 0x7FFFFFFFFF80
ACCOUNT_ID_SHIFT = 7

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_BASE32_VALUES = {c: i for i, c in enumerate(BASE32_ALPHABET)}

class KeyIDError(Exception):
    kind = "KeyIDError"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

class InputTooShort(KeyIDError):
    kind = "InputTooShort"

class DecodeError(KeyIDError):
    kind = "DecodeError"

def base32_decode(text: str) -> bytes:
    result = bytearray()
    buffer = 0
    num_bits = 0

    for ch in text:
        value = _BASE32_VALUES.get(ch)
        if value is None:
            raise DecodeError(f"unable to base32 decode key ID: unrecognized character {ch!r}")

        buffer = (buffer << 5) | value
        num_bits += 5

        if num_bits >= 8:
            num_bits -= 8
            result.append(buffer >> num_bits)
            buffer &= (1 << num_bits) - 1

    if num_bits >= 5 or buffer != 0:
        raise DecodeError("unable to base32 decode key ID: invalid padding or length")

    return bytes(result)

def extract_account_id(data: bytes) -> int:
    if len(data) < ACCOUNT_ID_BYTES:
        raise InputTooShort(f"key ID input too short: decoded {len(data)} bytes, need {ACCOUNT_ID_BYTES}")

    z = int.from_bytes(data[:ACCOUNT_ID_BYTES], "big")
    return (z & ACCOUNT_ID_MASK) >> ACCOUNT_ID_SHIFT

def decode_account_id(key_id: str) -> str:
    """Decode the account ID from a key ID and return it as a decimal string.

    Raises InputTooShort when the key ID (or its decoded payload) is too short
    and DecodeError when the payload is not valid base32.
    """
    key_id = key_id.strip()
    if len(key_id) < MIN_KEY_ID_LENGTH:
        raise InputTooShort(f"key ID input too short: {len(key_id)} characters, need at least {MIN_KEY_ID_LENGTH}")

    payload = key_id[PREFIX_LENGTH:].upper()
    decoded = base32_decode(payload)
    Message.debug(f"decoded {len(payload)} payload characters into {len(decoded)} bytes")

    account_id = extract_account_id(decoded)
    Message.debug(f"account ID {account_id} from prefix {key_id[:PREFIX_LENGTH].upper()}")
    return str(account_id)
