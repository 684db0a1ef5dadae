import pytest

from stacfile.version import Version, parse_version


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.0.0", Version.V1_0_0),
        ("1.1.0-beta.1", Version.V1_1_0_BETA_1),
        ("1.1.0", Version.V1_1_0),
    ],
)
def test_parse_known(text, expected):
    version = parse_version(text)
    assert version == expected
    assert version.is_known()


def test_parse_unknown_keeps_text():
    version = parse_version("0.9.0")
    assert not version.is_known()
    assert str(version) == "0.9.0"


@pytest.mark.parametrize("text", ["1.0.0", "1.1.0-beta.1", "1.1.0", "2.0.0-rc.1"])
def test_str_round_trip(text):
    assert str(parse_version(text)) == text
    assert parse_version(str(parse_version(text))) == parse_version(text)


def test_known_versions_are_ordered():
    assert parse_version("1.0.0") < parse_version("1.1.0-beta.1") < parse_version("1.1.0")


def test_unknown_sorts_after_known():
    assert Version.V1_1_0 < parse_version("0.1.0")


def test_unknown_versions_sort_by_text():
    assert parse_version("a") < parse_version("b")
    assert sorted([parse_version("b"), Version.V1_0_0, parse_version("a")]) == [
        Version.V1_0_0,
        parse_version("a"),
        parse_version("b"),
    ]


def test_parse_version_accepts_version():
    assert parse_version(Version.V1_1_0) is Version.V1_1_0


def test_hashable():
    assert len({parse_version("1.0.0"), Version.V1_0_0}) == 1