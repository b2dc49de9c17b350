import pytest

from docbase_mcp.config import ConfigurationError, load_settings


def test_load_settings_reads_required_values():
    settings = load_settings({"DOCBASE_TOKEN": "secret", "DOCBASE_DOMAIN": "acme"})
    assert settings.token == "secret"
    assert settings.domain == "acme"
    assert settings.log_level == "INFO"


def test_load_settings_log_level_is_uppercased():
    settings = load_settings(
        {"DOCBASE_TOKEN": "secret", "DOCBASE_DOMAIN": "acme", "LOG_LEVEL": "debug"}
    )
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("environ", "missing"),
    [
        ({"DOCBASE_DOMAIN": "acme"}, "DOCBASE_TOKEN"),
        ({"DOCBASE_TOKEN": "secret"}, "DOCBASE_DOMAIN"),
        ({"DOCBASE_TOKEN": "  ", "DOCBASE_DOMAIN": "acme"}, "DOCBASE_TOKEN"),
    ],
)
def test_load_settings_requires_token_and_domain(environ, missing):
    with pytest.raises(ConfigurationError, match=missing):
        load_settings(environ)


def test_load_settings_keeps_values_verbatim():
    settings = load_settings({"DOCBASE_TOKEN": " secret ", "DOCBASE_DOMAIN": "acme"})
    assert settings.token == " secret "
