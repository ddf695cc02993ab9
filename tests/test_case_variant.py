import pytest

from core.domain.case_variant import CaseVariant, DistanceDirection


def test_closed_set_of_variants():
    assert [v.value for v in CaseVariant] == ["upper", "lower", "title", "camel", "pascal", "snake", "kebab"]


def test_default_is_upper():
    assert CaseVariant.default() is CaseVariant.UPPER


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("snake", CaseVariant.SNAKE),
        ("SNAKE", CaseVariant.SNAKE),
        ("snake_case", CaseVariant.SNAKE),
        (" camelCase ", CaseVariant.CAMEL),
        ("Title Case", CaseVariant.TITLE),
        ("UPPERCASE", CaseVariant.UPPER),
    ],
)
def test_parse_accepts_values_and_labels(raw, expected):
    assert CaseVariant.parse(raw) is expected


def test_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown case variant"):
        CaseVariant.parse("sponge")


def test_labels():
    assert CaseVariant.KEBAB.label() == "kebab-case"
    assert CaseVariant.PASCAL.label() == "PascalCase"


def test_distance_direction():
    assert DistanceDirection.MILES_TO_KM.units() == ("mi", "km")
    assert DistanceDirection.KM_TO_MILES.label() == "Kilometers to Miles"
