from __future__ import annotations

import base64
import binascii
import hashlib
import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, cast

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger(__name__)

AZMGMT_DIR = os.path.expanduser(os.getenv("AZMGMT_HOME", "~/.azmgmt"))
CONFIG_PATH = os.path.join(AZMGMT_DIR, "config.json")

ACCESS_TOKEN_ENV = "AZMGMT_ACCESS_TOKEN"
SUBSCRIPTION_ENV = "AZURE_SUBSCRIPTION_ID"
ENCRYPTION_KEY_ENV = "AZMGMT_CONFIG_ENCRYPTION_KEY"
MANAGEMENT_SCOPE = "https://management.azure.com/.default"

_SENSITIVE_KEYS = ("access_token",)
_FERNET_SALT = b"azmgmt-config"
_cached_cipher: Fernet | None = None
_cached_cipher_key: str | None = None


class EncryptedConfigError(RuntimeError):
    """Raised when encrypted configuration cannot be decrypted."""


def _derive_fernet_key(raw: str) -> bytes | None:
    """Return a Fernet key from ``raw``: used as-is when it already is one, else PBKDF2-derived."""

    normalized = raw.strip().encode("utf-8")
    if not normalized:
        return None
    try:
        if len(base64.urlsafe_b64decode(normalized)) == 32:
            return normalized
    except (binascii.Error, ValueError):
        pass
    return base64.urlsafe_b64encode(
        hashlib.pbkdf2_hmac("sha256", normalized, _FERNET_SALT, 390_000, dklen=32)
    )


def _get_cipher() -> Fernet | None:
    global _cached_cipher, _cached_cipher_key

    key = os.getenv(ENCRYPTION_KEY_ENV)
    if key != _cached_cipher_key:
        _cached_cipher = None
        _cached_cipher_key = key
    if not key:
        return None
    if _cached_cipher is None:
        derived = _derive_fernet_key(key)
        if derived is None:
            logger.warning("%s is blank; storing config in plaintext.", ENCRYPTION_KEY_ENV)
            return None
        _cached_cipher = Fernet(derived)
    return _cached_cipher


def encrypt_field(value: str | None) -> str | None:
    """Encrypt ``value`` when an encryption key is configured."""

    if not value:
        return value
    cipher = _get_cipher()
    if cipher is None:
        return value
    return f"enc:{cipher.encrypt(value.encode('utf-8')).decode('utf-8')}"


def decrypt_field(value: str | None) -> str | None:
    """Decrypt ``value`` produced by :func:`encrypt_field`."""

    if not value or not value.startswith("enc:"):
        return value
    cipher = _get_cipher()
    if cipher is None:
        raise EncryptedConfigError(
            f"Encrypted azmgmt configuration detected but {ENCRYPTION_KEY_ENV} is not set."
        )
    try:
        return cipher.decrypt(value[4:].encode("utf-8")).decode("utf-8")
    except InvalidToken as exc:
        raise EncryptedConfigError("Unable to decrypt azmgmt configuration; verify encryption key.") from exc


def _secure_path(path: Path) -> None:
    if not path.exists():
        return
    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
            return
        mode = stat.S_IMODE(path.stat().st_mode)
        if mode & (stat.S_IRWXG | stat.S_IRWXO):
            logger.warning("Config file %s is group/world-accessible; resetting to 0o600.", path)
        path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce secure permissions for %s: %s", path, exc)


@dataclass
class Profile:
    name: str
    tenant_id: str | None = None
    client_id: str | None = None
    subscription_id: str | None = None
    client_secret_env: str | None = None
    default_location: str | None = None
    access_token: str | None = None
    scopes: list[str] | None = None

    @property
    def effective_scopes(self) -> list[str]:
        return list(self.scopes) if self.scopes else [MANAGEMENT_SCOPE]


_PROFILE_FIELDS = {f.name for f in fields(Profile)}


@dataclass
class ConfigData:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)

    @property
    def active_profile(self) -> Profile | None:
        if self.default_profile:
            return self.profiles.get(self.default_profile)
        return None


class ConfigStore:
    """JSON profile store; access tokens are encrypted when a key is configured."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else Path(CONFIG_PATH)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"default": None, "profiles": {}}
        _secure_path(self.path)
        with self.path.open("r", encoding="utf-8") as handle:
            return cast(dict[str, Any], json.load(handle))

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        profiles: dict[str, Profile] = {}
        for name, data in raw.get("profiles", {}).items():
            values = {k: v for k, v in data.items() if k in _PROFILE_FIELDS and k != "name"}
            for key in _SENSITIVE_KEYS:
                if isinstance(values.get(key), str):
                    values[key] = decrypt_field(values[key])
            profiles[name] = Profile(name=name, **values)
        return ConfigData(default_profile=raw.get("default"), profiles=profiles)

    def save(self, cfg: ConfigData) -> None:
        profiles: dict[str, Any] = {}
        for name, profile in cfg.profiles.items():
            payload = asdict(profile)
            for key in _SENSITIVE_KEYS:
                if isinstance(payload.get(key), str):
                    payload[key] = encrypt_field(payload[key])
            profiles[name] = payload
        self._write({"default": cfg.default_profile, "profiles": profiles})

    def add_or_update_profile(self, profile: Profile, *, set_default: bool = False) -> ConfigData:
        """Persist ``profile`` and optionally set it as default."""

        cfg = self.load()
        cfg.profiles[profile.name] = profile
        if set_default or not cfg.default_profile:
            cfg.default_profile = profile.name
        self.save(cfg)
        return cfg

    def set_default_profile(self, name: str) -> ConfigData:
        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        cfg.default_profile = name
        self.save(cfg)
        return cfg

    def delete_profile(self, name: str) -> ConfigData:
        cfg = self.load()
        cfg.profiles.pop(name, None)
        if cfg.default_profile == name:
            cfg.default_profile = None
        self.save(cfg)
        return cfg


def resolve_subscription_id(
    explicit: str | None = None, *, config: ConfigData | None = None
) -> str | None:
    """Return the subscription id from an explicit value, the environment or the default profile."""

    if explicit:
        return explicit
    from_env = os.getenv(SUBSCRIPTION_ENV)
    if from_env:
        return from_env
    profile = (config or ConfigStore().load()).active_profile
    return profile.subscription_id if profile else None


__all__ = [
    "ACCESS_TOKEN_ENV",
    "ConfigData",
    "ConfigStore",
    "EncryptedConfigError",
    "MANAGEMENT_SCOPE",
    "Profile",
    "SUBSCRIPTION_ENV",
    "decrypt_field",
    "encrypt_field",
    "resolve_subscription_id",
]
