import typing

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from chainrelay.constants import DEFAULT_ALLOWED_HOSTS
from chainrelay.exceptions import ConfigurationException


class Allowlist(BaseModel):
    """Hostnames the relay may forward to.

    Matching is an exact comparison on the hostname alone; ports and schemes
    are not part of an entry, so ``localhost`` admits every local port.
    """

    model_config = ConfigDict(frozen=True)

    version: str = "1"
    hosts: typing.FrozenSet[str]

    @field_validator("hosts", mode="before")
    def normalize_hosts(cls, values: typing.Iterable[str]):
        if values is None:
            values = []
        if not isinstance(values, (list, tuple, set, frozenset)):
            raise ValueError(f"Allowlist hosts must be a list of hostnames, got {type(values).__name__}")
        hosts = set()
        for host in values:
            if not isinstance(host, str) or not host.strip():
                raise ValueError(f"Invalid allowlist entry: {host!r}")
            if "/" in host or any(c.isspace() for c in host):
                raise ValueError(f"Allowlist entries must be bare hostnames: {host!r}")
            # IPv6 literals carry two or more colons; a single one means host:port
            if "[" in host or host.count(":") == 1:
                raise ValueError(f"Allowlist entries must not carry a port: {host!r}")
            hosts.add(host.lower())
        return frozenset(hosts)

    def is_allowed(self, hostname: str | None) -> bool:
        if not hostname:
            return False
        return hostname.lower() in self.hosts


def default_allowlist() -> Allowlist:
    return Allowlist(hosts=DEFAULT_ALLOWED_HOSTS)


def load_allowlist(path: str | None = None) -> Allowlist:
    if path is None:
        return default_allowlist()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return Allowlist(**data)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        raise ConfigurationException(f"Unable to load allowlist from {path}: {e!s}") from e
