import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ValidationError


@dataclass(frozen=True)
class Credentials:
    merchant_id: str
    hash_key: str
    hash_iv: str


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ValidationError(f"环境变量 {name} 不能为空")
    return value


def load_credentials() -> Credentials:
    load_dotenv()
    return Credentials(
        merchant_id=_require_env("NEWEBPAY_MERCHANT_ID"),
        hash_key=_require_env("NEWEBPAY_HASH_KEY"),
        hash_iv=_require_env("NEWEBPAY_HASH_IV"),
    )


def load_debug_flag() -> bool:
    load_dotenv()
    return os.getenv("NEWEBPAY_DEBUG", "true").strip().lower() in ("1", "true", "yes")
