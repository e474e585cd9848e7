import secrets
import string

KEY_PREFIX = "clip-"
KEY_CODE_LENGTH = 6
_ALPHABET = string.ascii_lowercase + string.digits


def generate_code(length: int = KEY_CODE_LENGTH) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_object_key(extension: str) -> str:
    # No uniqueness check against the bucket; a collision overwrites.
    extension = extension.lstrip(".")
    key = f"{KEY_PREFIX}{generate_code()}"
    if extension:
        key = f"{key}.{extension}"
    return key
