"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

import yaml

# Environment variable -> config file key
ENV_KEYS = {
    "ERRANDCTL_DIRECTOR_URL": "director_url",
    "ERRANDCTL_DEPLOYMENT": "deployment",
    "ERRANDCTL_CLIENT": "client",
    "ERRANDCTL_CLIENT_SECRET": "client_secret",
    "ERRANDCTL_CA_CERT": "ca_cert",
    "ERRANDCTL_SSL_VERIFY": "verify_ssl",
    "ERRANDCTL_POLL_INTERVAL": "poll_interval",
    "ERRANDCTL_REQUEST_TIMEOUT": "request_timeout",
}


@dataclass
class DirectorConfig:
    """Director connection configuration."""
    url: str
    deployment: str
    client: Optional[str] = None
    client_secret: Optional[str] = None
    ca_cert: Optional[str] = None
    verify_ssl: bool = True
    poll_interval: float = 1.0
    request_timeout: float = 30.0

    @property
    def has_credentials(self) -> bool:
        """Check if basic auth credentials are configured."""
        return bool(self.client and self.client_secret)

    @property
    def verify(self) -> Union[str, bool]:
        """TLS verification setting; a CA bundle path wins over the flag."""
        return self.ca_cert if self.ca_cert else self.verify_ssl


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_director_config(self) -> DirectorConfig:
        """Get director configuration."""
        ...


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _or_default(value: Any, default: Any) -> Any:
    # An empty YAML key loads as None; 0 and false are real values
    return default if value is None else value


def _build_director_config(values: Dict[str, Any]) -> DirectorConfig:
    url = values.get("director_url")
    if not url:
        raise ValueError(
            "Director URL is required. "
            "Set ERRANDCTL_DIRECTOR_URL or pass --director."
        )

    deployment = values.get("deployment")
    if not deployment:
        raise ValueError(
            "Deployment name is required. "
            "Set ERRANDCTL_DEPLOYMENT or pass --deployment."
        )

    return DirectorConfig(
        url=str(url).rstrip("/"),
        deployment=str(deployment),
        client=values.get("client") or None,
        client_secret=values.get("client_secret") or None,
        ca_cert=values.get("ca_cert") or None,
        verify_ssl=_as_bool(_or_default(values.get("verify_ssl"), True)),
        poll_interval=float(_or_default(values.get("poll_interval"), 1.0)),
        request_timeout=float(_or_default(values.get("request_timeout"), 30.0)),
    )


def _env_values() -> Dict[str, Any]:
    values = {}
    for env_name, key in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value is not None and value != "":
            values[key] = value
    return values


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        self.overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    def get_director_config(self) -> DirectorConfig:
        """Get director configuration from environment variables."""
        values = _env_values()
        values.update(self.overrides)
        return _build_director_config(values)


class YamlConfigProvider:
    """
    YAML file configuration provider.

    Environment variables override file values; explicit overrides
    (command line options) win over both.
    """

    def __init__(self, path: Union[str, Path], overrides: Optional[Dict[str, Any]] = None):
        self.path = Path(path)
        self.overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    def _load_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            raise ValueError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {self.path}")

        return {key: data[key] for key in ENV_KEYS.values() if key in data}

    def get_director_config(self) -> DirectorConfig:
        """Get director configuration from the YAML file."""
        values = self._load_file()
        values.update(_env_values())
        values.update(self.overrides)
        return _build_director_config(values)
