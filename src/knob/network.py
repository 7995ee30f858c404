"""Socket address helpers layered on top of ``Settings``.

``SocketSettings`` shows how to decorate the settings container with typed
accessors and defaults of your own.
"""

from __future__ import annotations

from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, model_validator

from knob.settings import Settings

DEFAULT_PORT = 8080
DEFAULT_IP = IPv4Address("127.0.0.1")


class SocketKey(Enum):
    """Settings keys used by ``SocketSettings``."""

    IP = "ip"
    PORT = "port"
    ADDR = "addr"


class SocketAddress(BaseModel):
    """An IP address and port, written ``1.2.3.4:80`` or ``[::1]:80``."""

    model_config = ConfigDict(frozen=True)

    ip: IPvAnyAddress
    port: int = Field(..., ge=0, le=65535)

    @model_validator(mode="before")
    @classmethod
    def split_address(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        host, sep, port = data.strip().rpartition(":")
        if not sep or not host:
            raise ValueError(f"expected 'ip:port', got {data!r}")
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        return {"ip": host, "port": port}

    def __str__(self) -> str:
        if isinstance(self.ip, IPv6Address):
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


class SocketSettings(Settings):
    """Settings with socket accessors.

    ``addr`` overrides ``ip`` and ``port`` when it is set.
    """

    def port(self) -> int:
        return self.get(SocketKey.PORT, int, DEFAULT_PORT)

    def ip(self) -> IPv4Address | IPv6Address:
        return self.get(SocketKey.IP, IPvAnyAddress, DEFAULT_IP)  # type: ignore[arg-type]

    def socket(self) -> SocketAddress:
        """Return ``addr`` if set, otherwise combine ``ip`` and ``port``."""
        if SocketKey.ADDR in self:
            return self.fetch(SocketKey.ADDR, SocketAddress)
        return SocketAddress(ip=self.ip(), port=self.port())
