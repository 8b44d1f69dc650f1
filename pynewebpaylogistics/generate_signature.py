"""
生成 PostData_ 和 HashData_（与官方 Node SDK 的 URLSearchParams + aes-256-cbc 一致）。

流程：
1. 按调用方给定的顺序把字段拼成 query string（不排序，空格编码为 +）
2. AES-256-CBC/PKCS7 加密，输出大写16进制 -> PostData_
3. SHA256("HashKey=<key>&<PostData_>&HashIV=<iv>")，输出大写16进制 -> HashData_
"""

from binascii import Error as BinasciiError
from binascii import unhexlify
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
import hashlib
import re
from urllib.parse import parse_qsl, quote_plus

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad, unpad

from .constants import RespondType, Version
from .errors import DecryptError, ValidationError


HASH_KEY_BYTES = 32
HASH_IV_BYTES = 16

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True)
class SignedPayload:
    merchant_id: str
    ciphertext: str
    digest: str
    version: str = Version.V_1_0.value
    respond_type: str = RespondType.JSON.value

    def to_form(self) -> OrderedDict:
        """表单字段，顺序与官方 PHP SDK 一致"""
        form = OrderedDict()
        form["MerchantID_"] = self.merchant_id
        form["PostData_"] = self.ciphertext
        # UID_ / EncryptData_ 沿用旧版 SDK 的重复字段
        form["UID_"] = self.merchant_id
        form["EncryptData_"] = self.ciphertext
        form["HashData_"] = self.digest
        form["Version_"] = self.version
        form["RespondType_"] = self.respond_type
        return form


def _encode_component(value) -> str:
    if isinstance(value, Enum):
        value = value.value
    # 与 URLSearchParams 一致：孤立代理项替换为 U+FFFD，* 不编码，~ 编码
    value = _LONE_SURROGATE.sub("\ufffd", str(value))
    return quote_plus(value, safe="*").replace("~", "%7E")


def build_query_string(fields: dict) -> str:
    """等价 new URLSearchParams(fields).toString()，保持字段顺序"""
    return "&".join(
        f"{_encode_component(key)}={_encode_component(value)}"
        for key, value in fields.items()
    )


def check_key_length(hash_key: str, hash_iv: str):
    key_length = len(hash_key.encode("utf-8"))
    if key_length != HASH_KEY_BYTES:
        raise ValidationError(
            f"hashKey must be {HASH_KEY_BYTES} bytes, got {key_length} bytes"
        )
    iv_length = len(hash_iv.encode("utf-8"))
    if iv_length != HASH_IV_BYTES:
        raise ValidationError(
            f"hashIV must be {HASH_IV_BYTES} bytes, got {iv_length} bytes"
        )


def encrypt_post_data(fields: dict, hash_key: str, hash_iv: str) -> str:
    """
    等价 createCipheriv("aes-256-cbc", key, iv) 加密 URLSearchParams(fields).toString()
    -> AES/CBC/PKCS7Padding，输出大写16进制。
    """
    check_key_length(hash_key, hash_iv)
    plaintext = build_query_string(fields).encode("utf-8")
    cipher = AES.new(hash_key.encode("utf-8"), AES.MODE_CBC, hash_iv.encode("utf-8"))
    encrypted = cipher.encrypt(pad(plaintext, AES.block_size))
    return encrypted.hex().upper()


def decrypt_post_data(ciphertext: str, hash_key: str, hash_iv: str) -> OrderedDict:
    """
    encrypt_post_data 的逆运算，用于解析蓝新回传的加密字段，大小写均可。
    """
    check_key_length(hash_key, hash_iv)
    try:
        encrypted_bytes = unhexlify(ciphertext)
    except (BinasciiError, ValueError) as e:
        raise DecryptError(f"ciphertext is not valid hex: {e}") from e
    cipher = AES.new(hash_key.encode("utf-8"), AES.MODE_CBC, hash_iv.encode("utf-8"))
    try:
        decrypted = unpad(cipher.decrypt(encrypted_bytes), AES.block_size)
        query_string = decrypted.decode("utf-8")
    except ValueError as e:
        # unpad 的填充错误和 UnicodeDecodeError 都是 ValueError
        raise DecryptError(f"unable to decrypt ciphertext: {e}") from e
    return OrderedDict(parse_qsl(query_string, keep_blank_values=True))


def hash_post_data(ciphertext: str, hash_key: str, hash_iv: str) -> str:
    """等价 strtoupper(hash("sha256", "HashKey=...&PostData_&HashIV=..."))"""
    raw = f"HashKey={hash_key}&{ciphertext}&HashIV={hash_iv}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest().upper()


def build_payload(merchant_id: str, ciphertext: str, digest: str) -> SignedPayload:
    return SignedPayload(
        merchant_id=str(merchant_id),
        ciphertext=ciphertext,
        digest=digest,
    )


def sign_fields(fields: dict, credentials) -> SignedPayload:
    """加密 + 签名 + 组装，credentials 需有 merchant_id / hash_key / hash_iv"""
    ciphertext = encrypt_post_data(fields, credentials.hash_key, credentials.hash_iv)
    digest = hash_post_data(ciphertext, credentials.hash_key, credentials.hash_iv)
    return build_payload(credentials.merchant_id, ciphertext, digest)
