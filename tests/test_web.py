import pytest

from gatus.web import (
    DEFAULT_ADDRESS,
    DEFAULT_PORT,
    TLSConfig,
    WebConfig,
    WebConfigError,
    default_config,
)


def test_default_config_socket_address():
    assert default_config().socket_address() == "0.0.0.0:8080"


def test_validate_sets_defaults():
    cfg = WebConfig()
    cfg.validate_and_set_defaults()
    assert cfg.address == DEFAULT_ADDRESS
    assert cfg.port == DEFAULT_PORT


def test_validate_keeps_custom_values():
    cfg = WebConfig(address="127.0.0.1", port=9000)
    cfg.validate_and_set_defaults()
    assert cfg.socket_address() == "127.0.0.1:9000"


@pytest.mark.parametrize("port", [-1, 65536, 100000])
def test_invalid_port(port):
    cfg = WebConfig(port=port)
    with pytest.raises(WebConfigError, match="invalid port"):
        cfg.validate_and_set_defaults()


def test_highest_port_is_accepted():
    cfg = WebConfig(port=65535)
    cfg.validate_and_set_defaults()
    assert cfg.port == 65535


@pytest.mark.parametrize(
    "tls",
    [
        TLSConfig(),
        TLSConfig(certificate_file="cert.pem"),
        TLSConfig(private_key_file="secret"),
    ],
)
def test_tls_requires_both_files(tls):
    cfg = WebConfig(tls=tls)
    with pytest.raises(WebConfigError, match="must be specified"):
        cfg.validate_and_set_defaults()


def test_tls_with_missing_files(tmp_path):
    missing_cert = tmp_path / "missing-cert.pem"
    missing_second_pem = tmp_path / "missing-second.pem"
    tls = TLSConfig(
        certificate_file=str(missing_cert),
        private_key_file=str(missing_second_pem),
    )
    cfg = WebConfig(tls=tls)
    with pytest.raises(WebConfigError, match="invalid tls config"):
        cfg.validate_and_set_defaults()


def test_tls_with_garbage_files(tmp_path):
    cert = tmp_path / "cert.pem"
    second_pem = tmp_path / "second.pem"
    cert.write_text("not a certificate")
    second_pem.write_text("placeholder")
    with pytest.raises(WebConfigError):
        TLSConfig(certificate_file=str(cert), private_key_file=str(second_pem)).validate()


@pytest.mark.parametrize(
    "tls, expected",
    [
        (None, False),
        (TLSConfig(), False),
        (TLSConfig(certificate_file="cert.pem"), False),
        (TLSConfig(certificate_file="cert.pem", private_key_file="secret"), True),
    ],
)
def test_has_tls(tls, expected):
    assert WebConfig(tls=tls).has_tls() is expected


def test_from_dict():
    cfg = WebConfig.from_dict(
        {"address": "127.0.0.1", "port": 8443, "tls": {"certificate-file": "c.pem", "private-key-file": "secret"}}
    )
    assert cfg.address == "127.0.0.1"
    assert cfg.port == 8443
    assert cfg.tls == TLSConfig(certificate_file="c.pem", private_key_file="secret")
    assert cfg.has_tls() is True


def test_from_empty_dict_then_defaults():
    cfg = WebConfig.from_dict({})
    assert cfg.tls is None
    cfg.validate_and_set_defaults()
    assert cfg == default_config()