"""Tests for Jurisdiction value object."""

from judgefinder.domain.common.value_objects.jurisdiction import Jurisdiction, JurisdictionLevel


class TestJurisdiction:
    def test_state(self) -> None:
        california = Jurisdiction.state(" California ").unwrap()
        assert california.is_state()
        assert str(california) == "California"

    def test_empty_names_rejected(self) -> None:
        assert Jurisdiction.state("").unwrap_err().message == "State cannot be empty"
        assert Jurisdiction.county("California", " ").unwrap_err().message == (
            "County cannot be empty"
        )

    def test_county_display(self) -> None:
        county = Jurisdiction.county("California", "Los Angeles").unwrap()
        assert str(county) == "Los Angeles County, California"
        assert county.to_short_string() == "Los Angeles County"

    def test_federal_display(self) -> None:
        assert str(Jurisdiction.federal().unwrap()) == "Federal"
        district = Jurisdiction.federal("Northern District of California").unwrap()
        assert str(district) == "Federal - Northern District of California"
        assert district.to_short_string() == "Federal"

    def test_parse(self) -> None:
        assert Jurisdiction.parse("Federal").unwrap().is_federal()
        assert Jurisdiction.parse("Federal - Southern District").unwrap().district == (
            "Southern District"
        )
        county = Jurisdiction.parse("Orange County, California").unwrap()
        assert county.level == JurisdictionLevel.COUNTY
        assert county.county_name == "Orange"
        assert county.state_name == "California"
        assert Jurisdiction.parse("Texas").unwrap() == Jurisdiction.state("Texas").unwrap()

    def test_is_within(self) -> None:
        federal = Jurisdiction.federal().unwrap()
        california = Jurisdiction.state("California").unwrap()
        texas = Jurisdiction.state("Texas").unwrap()
        orange = Jurisdiction.county("California", "Orange").unwrap()

        assert orange.is_within(california)
        assert orange.is_within(federal)
        assert california.is_within(federal)
        assert not orange.is_within(texas)
        assert not california.is_within(orange)
        assert california.is_within(california)

    def test_round_trip_dict(self) -> None:
        orange = Jurisdiction.county("California", "Orange").unwrap()
        data = orange.to_dict()
        assert data["display"] == "Orange County, California"
        assert Jurisdiction.from_dict(data).unwrap() == orange

    def test_invalid_record(self) -> None:
        result = Jurisdiction.from_dict({"level": "county", "state": "California"})
        assert result.unwrap_err().message == "Invalid jurisdiction record"
