"""Error class hierarchy tests."""

import pytest

from odf2json._errors import (
    ConversionError,
    DiscoveryError,
    EmitterStateError,
    InvalidFormatError,
)


class TestConversionErrorBase:
    def test_str_returns_user_message(self):
        err = ConversionError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = ConversionError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = ConversionError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = OSError("root cause")
        err = ConversionError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        InvalidFormatError,
        EmitterStateError,
        DiscoveryError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_conversion_error(self, cls):
        assert issubclass(cls, ConversionError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_conversion_error(self, cls):
        with pytest.raises(ConversionError):
            raise cls("test")


class TestInvalidFormatError:
    def test_location_defaults(self):
        err = InvalidFormatError("bad section")
        assert (err.file_name, err.line_number, err.line) == ("", 0, "")

    def test_location(self):
        err = InvalidFormatError("bad section", file_name="f.odf", line_number=3, line="[x")
        assert err.file_name == "f.odf"
        assert err.line_number == 3
        assert err.line == "[x"
