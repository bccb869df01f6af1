"""Tests for per-entity line overrides."""

import json

import pytest

from govaddress import DEFAULT_OVERRIDES, EditOp, LineEdit, LineEditor, MatchMode, OverrideTable


class TestLineEdit:
    """Tests for individual edits."""

    def test_replace_equals(self):
        edit = LineEdit(EditOp.REPLACE, "67/69 CHURCH ST", value="67 CHURCH ST")
        assert edit.apply(["67/69 CHURCH ST", "FREEHOLD"]) == ["67 CHURCH ST", "FREEHOLD"]

    def test_replace_starts_with(self):
        edit = LineEdit(EditOp.REPLACE, "HART SENATE", MatchMode.STARTS_WITH, value="530 HART SOB")
        assert edit.apply(["HART SENATE OFFICE BLDG, RM 530"]) == ["530 HART SOB"]

    def test_substitute(self):
        edit = LineEdit(EditOp.SUBSTITUTE, "OFFICE SUITE:", MatchMode.CONTAINS, value="STE")
        assert edit.apply(["100 MAIN ST OFFICE SUITE: 4"]) == ["100 MAIN ST STE 4"]

    def test_remove(self):
        edit = LineEdit(EditOp.REMOVE, "TOWER II")
        assert edit.apply(["TOWER II", "555 N CARANCAHUA ST"]) == ["555 N CARANCAHUA ST"]

    def test_remove_contains(self):
        edit = LineEdit(EditOp.REMOVE, "APPT", MatchMode.CONTAINS)
        assert edit.apply(["BY APPT ONLY", "1 MAIN ST"]) == ["1 MAIN ST"]

    def test_split(self):
        edit = LineEdit(
            EditOp.SPLIT,
            "430 NORTH FRANKLIN ST FORT BRAGG, CA 95437",
            values=("430 NORTH FRANKLIN ST", "FORT BRAGG, CA 95437"),
        )
        result = edit.apply(["430 NORTH FRANKLIN ST FORT BRAGG, CA 95437"])
        assert result == ["430 NORTH FRANKLIN ST", "FORT BRAGG, CA 95437"]

    def test_replace_removes_following_lines(self):
        edit = LineEdit(EditOp.REPLACE, "2146 27", value="2146 27TH AVE", remove_following=2)
        result = edit.apply(["2146 27", "TH", "AVE", "MARION"])
        assert result == ["2146 27TH AVE", "MARION"]

    def test_remove_following_clamped_at_end(self):
        edit = LineEdit(EditOp.REPLACE, "A", value="B", remove_following=5)
        assert edit.apply(["X", "A", "C"]) == ["X", "B"]

    def test_insert_before(self):
        edit = LineEdit(EditOp.INSERT_BEFORE, "WASHINGTON", values=("143 CANNON HOB",))
        result = edit.apply(["WASHINGTON", "DC", "20515"])
        assert result == ["143 CANNON HOB", "WASHINGTON", "DC", "20515"]

    def test_insert_before_is_idempotent(self):
        edit = LineEdit(EditOp.INSERT_BEFORE, "WASHINGTON", values=("143 CANNON HOB",))
        once = edit.apply(["WASHINGTON", "DC", "20515"])
        assert edit.apply(once) == once

    def test_insert_after_first_match_only(self):
        edit = LineEdit(EditOp.INSERT_AFTER, "1 MAIN ST", values=("STE 2",))
        result = edit.apply(["1 MAIN ST", "X", "1 MAIN ST"])
        assert result == ["1 MAIN ST", "STE 2", "X", "1 MAIN ST"]
        assert edit.apply(result) == result

    def test_missing_literal_is_noop(self):
        lines = ["440 SOUTH WARREN STREET", "SUITE 706"]
        for op in EditOp:
            edit = LineEdit(op, "NOT ON THE PAGE", value="X", values=("Y",), remove_following=3)
            assert edit.apply(lines) == lines

    def test_dict_round_trip(self):
        edit = LineEdit(EditOp.SPLIT, "A B", MatchMode.CONTAINS, values=("A", "B"), remove_following=1)
        assert LineEdit.from_dict(edit.to_dict()) == edit


class TestOverrideTable:
    """Tests for OverrideTable."""

    @pytest.fixture
    def table(self):
        return OverrideTable(
            {
                ("Michael", "Cloud"): [LineEdit(EditOp.REMOVE, "TOWER II")],
                ("Frank", "Pallone"): [
                    LineEdit(EditOp.REPLACE, "67/69 CHURCH ST", value="67 CHURCH ST")
                ],
            }
        )

    def test_apply_for_identity(self, table):
        assert table.apply(("Michael", "Cloud"), ["TOWER II", "1 A ST"]) == ["1 A ST"]

    def test_unknown_identity_unchanged(self, table):
        lines = ["TOWER II"]
        assert table.apply(("Jane", "Doe"), lines) == lines
        assert table.rules_for(("Jane", "Doe")) == ()

    def test_apply_does_not_mutate_input(self, table):
        lines = ["TOWER II", "1 A ST"]
        table.apply(("Michael", "Cloud"), lines)
        assert lines == ["TOWER II", "1 A ST"]

    def test_rules_are_read_only(self, table):
        with pytest.raises(TypeError):
            table.rules[("Jane", "Doe")] = ()

    def test_contains_and_len(self, table):
        assert ("Michael", "Cloud") in table
        assert len(table) == 2

    def test_from_json(self, tmp_path):
        path = tmp_path / "overrides.json"
        path.write_text(
            json.dumps(
                {
                    "rules": [
                        {
                            "first_name": "Jane",
                            "last_name": "Doe",
                            "edits": [{"op": "replace", "match": "STE 1", "value": "SUITE 1"}],
                        }
                    ]
                }
            )
        )
        table = OverrideTable.from_json(path)
        assert table.apply(("Jane", "Doe"), ["STE 1"]) == ["SUITE 1"]

    def test_to_dict_matches_from_json(self, table, tmp_path):
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps(table.to_dict()))
        assert dict(OverrideTable.from_json(path).rules) == dict(table.rules)

    def test_merged_runs_other_edits_last(self, table):
        extra = OverrideTable(
            {("Frank", "Pallone"): [LineEdit(EditOp.REPLACE, "67 CHURCH ST", value="67 CHURCH STREET")]}
        )
        merged = table.merged(extra)
        assert merged.apply(("Frank", "Pallone"), ["67/69 CHURCH ST"]) == ["67 CHURCH STREET"]
        assert ("Michael", "Cloud") in merged


class TestDefaultOverrides:
    """Tests for the shipped corrections."""

    def test_senate_room_fixed(self):
        lines = DEFAULT_OVERRIDES.apply(("Sheldon", "Whitehouse"), ["HART SENATE OFFICE BLDG, RM 530"])
        assert LineEditor().edit(lines) == ["530 HART SOB"]

    def test_split_street_and_city(self):
        lines = DEFAULT_OVERRIDES.apply(
            ("Cynthia", "Lummis"),
            ["RUSSELL SENATE OFFICE BUILDING SUITE SR-127A WASHINGTON, DC 20510"],
        )
        assert LineEditor().edit(lines) == ["127 RUSSELL SOB", "WASHINGTON", "DC", "20510"]

    def test_missing_dc_office_inserted(self):
        lines = DEFAULT_OVERRIDES.apply(("Max", "Miller"), ["WASHINGTON", "DC 20515"])
        assert lines == ["143 CANNON HOB", "WASHINGTON", "DC 20515"]

    def test_house_and_senate_present(self):
        assert ("Frank", "Pallone") in DEFAULT_OVERRIDES
        assert ("Ted", "Cruz") in DEFAULT_OVERRIDES
