import os
from functools import lru_cache
from typing import Optional
from cryptography.fernet import Fernet
from dotenv import load_dotenv
from fastapi.logger import logger

load_dotenv()


@lru_cache(maxsize=1)
def get_cipher() -> Fernet:
    """
    Build the Fernet cipher used for tenant personal data.

    The key comes from ENCRYPTION_KEY. Without it a throwaway key is generated,
    which means values stored in this process cannot be read by the next one.
    """
    key = os.getenv("ENCRYPTION_KEY")
    if not key:
        key = Fernet.generate_key().decode()
        logger.warning(
            "ENCRYPTION_KEY not found in environment. Using a generated key; "
            "add ENCRYPTION_KEY to your .env file to keep stored data readable.")
    return Fernet(key.encode() if isinstance(key, str) else key)


def encrypt_data(data: Optional[str]) -> str:
    """
    Encrypt sensitive data

    Args:
        data: The string data to encrypt

    Returns:
        Encrypted string, or an empty string for empty input
    """
    if not data:
        return ""
    return get_cipher().encrypt(data.encode()).decode()


def decrypt_data(encrypted_data: Optional[str]) -> str:
    """
    Decrypt sensitive data

    Raises:
        cryptography.fernet.InvalidToken: if the value was not produced with
            the current key
    """
    if not encrypted_data:
        return ""
    return get_cipher().decrypt(encrypted_data.encode()).decode()
