import pytest

from gatus.ui import (
    DEFAULT_DESCRIPTION,
    DEFAULT_HEADER,
    DEFAULT_LOGO,
    DEFAULT_TITLE,
    Button,
    ButtonValidationError,
    UIConfig,
    default_config,
)


def test_validate_and_set_defaults():
    cfg = UIConfig(title="", description="", header="", logo="", link="")
    cfg.validate_and_set_defaults()
    assert cfg.title == DEFAULT_TITLE
    assert cfg.description == DEFAULT_DESCRIPTION
    assert cfg.header == DEFAULT_HEADER


def test_default_title_value():
    cfg = UIConfig()
    cfg.validate_and_set_defaults()
    assert cfg.title == "Health Dashboard | Gatus"
    assert cfg.header == "Health Status"


def test_validate_keeps_custom_values():
    cfg = UIConfig(title="My Status", description="desc", header="Head", logo="logo.png", link="/home")
    cfg.validate_and_set_defaults()
    assert (cfg.title, cfg.description, cfg.header, cfg.logo, cfg.link) == (
        "My Status",
        "desc",
        "Head",
        "logo.png",
        "/home",
    )


@pytest.mark.parametrize(
    "name, link, should_fail",
    [
        ("", "", True),
        ("", "link", True),
        ("name", "", True),
        ("name", "link", False),
    ],
)
def test_button_validate(name, link, should_fail):
    button = Button(name=name, link=link)
    if should_fail:
        with pytest.raises(ButtonValidationError, match="missing required name or link"):
            button.validate()
    else:
        assert button.validate() is None


def test_get_default_config():
    cfg = default_config()
    assert cfg.title == DEFAULT_TITLE
    assert cfg.logo == DEFAULT_LOGO


def test_invalid_button_fails_config_validation():
    cfg = UIConfig(buttons=[Button(name="ok", link="ok"), Button(name="broken")])
    with pytest.raises(ButtonValidationError):
        cfg.validate_and_set_defaults()


def test_from_dict():
    cfg = UIConfig.from_dict(
        {
            "title": "T",
            "header": "H",
            "buttons": [{"name": "Home", "link": "https://example.com"}],
        }
    )
    assert cfg.title == "T"
    assert cfg.header == "H"
    assert cfg.buttons == [Button(name="Home", link="https://example.com")]
    cfg.validate_and_set_defaults()
    assert cfg.description == DEFAULT_DESCRIPTION


def test_from_none_then_defaults_matches_default_config():
    cfg = UIConfig.from_dict(None)
    cfg.validate_and_set_defaults()
    assert cfg == default_config()


def test_button_from_dict():
    assert Button.from_dict({"name": "Docs", "link": "/docs"}) == Button(name="Docs", link="/docs")