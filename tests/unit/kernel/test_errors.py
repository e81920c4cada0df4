"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_hermes.kernel.errors import (
    ApplicationError,
    ConfigError,
    HermesError,
    InfrastructureError,
    InvalidSettingValueError,
    RegistryFrozenError,
    SerializeError,
    UnknownPriorityError,
)


class TestHermesError:
    def test_default_code(self) -> None:
        err = HermesError("boom")
        assert err.code == "hermes_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_to_dict_flattens_detail(self) -> None:
        err = HermesError("boom", code="custom", detail={"key": "hermes"})
        assert err.to_dict() == {"error_code": "custom", "error": "boom", "key": "hermes"}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = HermesError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError('inner')"

    def test_str_carries_code(self) -> None:
        assert str(UnknownPriorityError(3)) == "[unknown_priority] Unknown priority 3"

    def test_repr(self) -> None:
        assert repr(HermesError("x")) == "HermesError(code='hermes_error', message='x')"


class TestHierarchy:
    @pytest.mark.parametrize("cls,parent", [
        (UnknownPriorityError, ApplicationError),
        (RegistryFrozenError, ApplicationError),
        (ConfigError, ApplicationError),
        (SerializeError, InfrastructureError),
        (ApplicationError, HermesError),
        (InfrastructureError, HermesError),
    ])
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)

    def test_unknown_priority_carries_priority(self) -> None:
        err = UnknownPriorityError(7)
        assert err.priority == 7
        assert err.code == "unknown_priority"
        assert err.message == "Unknown priority 7"

    def test_serialize_error_payload_type(self) -> None:
        err = SerializeError("bad", payload_type="set")
        assert err.payload_type == "set"
        assert err.code == "serialize_error"

    def test_invalid_setting_value_message(self) -> None:
        err = InvalidSettingValueError("refresh_interval", -1, "must be >= 0")
        assert "refresh_interval" in err.message
        assert err.value == -1
        assert err.detail == {"setting": "refresh_interval"}

    def test_unknown_priority_detail(self) -> None:
        assert UnknownPriorityError(7).to_dict()["priority"] == 7
