import AccountID
import Message
import ResourceType

def describe(key_id: str):
    prefix = ResourceType.get_prefix(key_id)
    if prefix is not None and ResourceType.is_legacy_prefix(key_id):
        Message.warning(f"Key ID prefix {prefix} is a legacy format, account ID will not be accurate")

    account_id = AccountID.decode_account_id(key_id)

    return {
        "key_id": key_id.strip().upper(),
        "prefix": prefix,
        "resource_type": ResourceType.classify(key_id),
        "account_id": account_id,
    }
