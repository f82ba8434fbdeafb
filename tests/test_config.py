from precisely import assert_that, has_attrs

from bookmarkets.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "GRAPHQL_PATH", "LOG_LEVEL", "CHECK_INTEGRITY", "DEBUG"):
        monkeypatch.delenv("BOOKMARKETS_" + name, raising=False)

    assert_that(Settings(), has_attrs(
        host="localhost",
        port=4000,
        graphql_path="/graphql",
        log_level="INFO",
        check_integrity=True,
        debug=False,
    ))


def test_settings_are_read_from_prefixed_environment_variables(monkeypatch):
    monkeypatch.setenv("BOOKMARKETS_PORT", "8080")
    monkeypatch.setenv("BOOKMARKETS_CHECK_INTEGRITY", "false")
    monkeypatch.setenv("PORT", "9999")

    assert_that(Settings(), has_attrs(port=8080, check_integrity=False))
