import pytest

from stacfile.errors import (
    FeatureNotEnabledError,
    FromPathError,
    IncorrectTypeError,
    MissingFieldError,
    ScalarJsonError,
    StacError,
    UnsupportedFormatError,
)


def test_unsupported_format_message():
    error = UnsupportedFormatError("parquet")
    assert str(error) == "unsupported format: parquet"
    assert error.format_name == "parquet"


def test_unsupported_format_is_value_error():
    error = UnsupportedFormatError("xyz")
    assert isinstance(error, ValueError)
    assert error.format_name == "xyz"
    assert str(error) == "unsupported format: xyz"


def test_feature_not_enabled_message():
    error = FeatureNotEnabledError("reqwest")
    assert str(error) == "reqwest is not enabled"
    assert error.feature == "reqwest"


def test_missing_field_message():
    error = MissingFieldError("stac_version")
    assert str(error) == 'no "stac_version" field in the JSON object'
    assert error.field == "stac_version"


def test_scalar_json_keeps_value():
    error = ScalarJsonError(42)
    assert str(error) == "json value is not an object or an array"
    assert error.value == 42


def test_incorrect_type_attributes():
    error = IncorrectTypeError(actual="Catalog", expected="Item")
    assert error.actual == "Catalog"
    assert error.expected == "Item"
    assert "Item" in str(error) and "Catalog" in str(error)


def test_from_path_message_joins_io_and_path():
    io = FileNotFoundError("no such file")
    error = FromPathError(io, "/tmp/missing.json")
    assert str(error) == f"{io}: /tmp/missing.json"
    assert error.io is io
    assert error.path == "/tmp/missing.json"


@pytest.mark.parametrize(
    "error",
    [
        IncorrectTypeError("a", "b"),
        UnsupportedFormatError("x"),
        FeatureNotEnabledError("x"),
        MissingFieldError("x"),
        ScalarJsonError(None),
        FromPathError(OSError("x"), "p"),
    ],
)
def test_all_errors_are_stac_errors(error):
    with pytest.raises(StacError) as info:
        raise error
    assert info.value is error