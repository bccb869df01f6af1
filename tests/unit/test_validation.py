"""Tests for address deduplication and validation."""

import pytest

from govaddress import (
    ZIP_DENYLIST,
    Address,
    ValidationError,
    deduplicate,
    filter_denylisted,
    validate_addresses,
)


class TestDeduplicate:
    """Tests for deduplicate()."""

    def test_removes_duplicates_and_sorts(self, dc_address, district_address):
        result = deduplicate([district_address, dc_address, district_address])
        assert result == [dc_address, district_address]

    def test_idempotent(self, dc_address, district_address):
        once = deduplicate([district_address, dc_address])
        assert deduplicate(once) == once

    def test_missing_address2_sorts_first(self):
        bare = Address("1 MAIN ST", None, "ALBANY", "NY", "12207")
        suite = Address("1 MAIN ST", "STE 2", "ALBANY", "NY", "12207")
        assert deduplicate([suite, bare]) == [bare, suite]


class TestFilterDenylisted:
    """Tests for filter_denylisted()."""

    def test_default_denylist(self, dc_address):
        artifact = Address("89511", "ELKO CONTACT", "ELKO", "NV", "89801")
        assert filter_denylisted([artifact, dc_address]) == [dc_address]

    def test_known_artifacts(self):
        assert ZIP_DENYLIST == {"89801", "49854"}

    def test_custom_denylist(self, dc_address, district_address):
        result = filter_denylisted([dc_address, district_address], denylist={"13202"})
        assert result == [dc_address]


class TestValidateAddresses:
    """Tests for validate_addresses()."""

    def test_valid(self, dc_address, district_address):
        validate_addresses([dc_address, district_address], check_lengths=True)

    @pytest.mark.parametrize("field", ["address1", "city", "state", "zip"])
    def test_empty_required_field(self, field):
        values = {"address1": "1 MAIN ST", "city": "ALBANY", "state": "NY", "zip": "12207"}
        values[field] = ""
        with pytest.raises(ValidationError) as exc_info:
            validate_addresses([Address(**values)])
        assert exc_info.value.field == field

    def test_bad_zip(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_addresses([Address("1 MAIN ST", None, "ALBANY", "NY", "1220")])
        assert exc_info.value.field == "zip"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_addresses([Address("", None, "ALBANY", "NY", "12207")])

    def test_lengths_only_when_requested(self):
        address = Address("1 " + "A" * 45, None, "ALBANY", "NY", "12207")
        validate_addresses([address])
        with pytest.raises(ValidationError) as exc_info:
            validate_addresses([address], check_lengths=True)
        assert exc_info.value.field == "address1"

    def test_long_address2(self):
        address = Address("1 MAIN ST", "B" * 41, "ALBANY", "NY", "12207")
        with pytest.raises(ValidationError) as exc_info:
            validate_addresses([address], check_lengths=True)
        assert exc_info.value.field == "address2"

    def test_length_check_agrees_with_is_mailable(self, dc_address):
        address = Address("1 MAIN ST", None, "ALBANY", "NEW YORK", "12207")
        assert not address.is_mailable
        with pytest.raises(ValidationError) as exc_info:
            validate_addresses([address], check_lengths=True)
        assert exc_info.value.field == "state"
        assert dc_address.is_mailable
        validate_addresses([dc_address], check_lengths=True)
