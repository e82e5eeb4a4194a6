"""Tests for domain exception hierarchy."""

from __future__ import annotations

import pytest

from selvis.foundation.domain.exceptions import (
    DomainError,
    SchemaError,
    SettingsDocumentError,
    SettingsNotLoadedError,
)


@pytest.mark.unit
class TestDomainError:
    """Tests for base DomainError."""

    def test_message_and_code(self) -> None:
        err = DomainError("Something failed")
        assert err.message == "Something failed"
        assert err.error_code == "DOMAIN_ERROR"
        assert err.context == {}

    def test_context_dict(self) -> None:
        ctx = {"key": "value", "count": 42}
        err = DomainError("Failed", context=ctx)
        assert err.context == ctx

    def test_str_without_context(self) -> None:
        err = DomainError("Simple failure")
        assert str(err) == "Simple failure"

    def test_str_with_context(self) -> None:
        err = DomainError("Failed", context={"key": "maxSize"})
        assert str(err) == "Failed (key=maxSize)"

    def test_repr(self) -> None:
        err = DomainError("Failed", context={"a": 1})
        assert repr(err) == "DomainError('Failed', context={'a': 1})"


@pytest.mark.unit
class TestSchemaError:
    def test_is_domain_error(self) -> None:
        assert issubclass(SchemaError, DomainError)

    def test_error_code(self) -> None:
        assert SchemaError("bad").error_code == "SETTINGS_SCHEMA_INVALID"

    def test_keyword_context(self) -> None:
        err = SchemaError("Duplicate setting key", key="maxSize")
        assert err.context == {"key": "maxSize"}
        assert "key=maxSize" in str(err)


@pytest.mark.unit
class TestSettingsNotLoadedError:
    def test_error_code_and_message(self) -> None:
        err = SettingsNotLoadedError()
        assert err.error_code == "SETTINGS_NOT_LOADED"
        assert "load()" in err.message


@pytest.mark.unit
class TestSettingsDocumentError:
    def test_path_and_context(self) -> None:
        err = SettingsDocumentError("/srv/config.yml", "invalid YAML")
        assert err.path == "/srv/config.yml"
        assert err.error_code == "SETTINGS_DOCUMENT_INVALID"
        assert err.context == {"path": "/srv/config.yml", "reason": "invalid YAML"}
        assert "invalid YAML" in err.message

    def test_catchable_as_domain_error(self) -> None:
        with pytest.raises(DomainError):
            raise SettingsDocumentError("config.yml", "root must be a mapping")
