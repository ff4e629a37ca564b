"""Configuration of the web server that serves the dashboard."""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_ADDRESS = "0.0.0.0"
DEFAULT_PORT = 8080
MAX_PORT = 65535


class WebConfigError(ValueError):
    """Raised when the web configuration is invalid."""


@dataclass
class TLSConfig:
    """Certificate and private key files in PEM format."""

    certificate_file: str = ""
    private_key_file: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TLSConfig:
        data = data or {}
        return cls(
            certificate_file=str(data.get("certificate-file") or ""),
            private_key_file=str(data.get("private-key-file") or ""),
        )

    def validate(self) -> None:
        """Check that both files are given and form a loadable key pair."""
        if not (self.certificate_file and self.private_key_file):
            raise WebConfigError("certificate-file and private-key-file must be specified")
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        try:
            context.load_cert_chain(self.certificate_file, self.private_key_file)
        except (ssl.SSLError, OSError) as exc:
            raise WebConfigError(str(exc)) from exc


@dataclass
class WebConfig:
    """Address and port to listen on, with optional TLS."""

    address: str = ""
    port: int = 0
    tls: TLSConfig | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WebConfig:
        data = data or {}
        tls = data.get("tls")
        return cls(
            address=str(data.get("address") or ""),
            port=int(data.get("port") or 0),
            tls=None if tls is None else TLSConfig.from_dict(tls),
        )

    def validate_and_set_defaults(self) -> None:
        if not self.address:
            self.address = DEFAULT_ADDRESS
        if self.port == 0:
            self.port = DEFAULT_PORT
        elif self.port < 0 or self.port > MAX_PORT:
            raise WebConfigError(f"invalid port: value should be between 0 and {MAX_PORT}")
        if self.tls is not None:
            try:
                self.tls.validate()
            except WebConfigError as exc:
                raise WebConfigError(f"invalid tls config: {exc}") from exc

    def has_tls(self) -> bool:
        return self.tls is not None and bool(self.tls.certificate_file) and bool(self.tls.private_key_file)

    def socket_address(self) -> str:
        return f"{self.address}:{self.port}"


def default_config() -> WebConfig:
    """Return a configuration listening on the default address and port."""
    return WebConfig(address=DEFAULT_ADDRESS, port=DEFAULT_PORT)