from hallyu_api.query.fields import getField
from hallyu_api.query.filtering import filterItems


def test_boolean_filter_on_yes_no_values():
	records = [{"Active": "Yes"}, {"Active": "No"}]
	assert filterItems(records, {"Active": True}) == [{"Active": "Yes"}]
	assert filterItems(records, {"Active": False}) == [{"Active": "No"}]


def test_boolean_filter_missing_counts_as_false():
	records = [{"Name": "NCT"}, {"Name": "BTS", "Active": True}, {"Name": "WG", "Active": False}]
	assert [r["Name"] for r in filterItems(records, {"Active": False})] == ["NCT", "WG"]
	assert [r["Name"] for r in filterItems(records, {"Active": True})] == ["BTS"]


def test_string_filter_is_case_insensitive_substring():
	records = [
		{"Company": "YG Entertainment"},
		{"Company": "SM Entertainment"},
		{"Company": None},
		{},
	]
	assert filterItems(records, {"Company": "yg"}) == [{"Company": "YG Entertainment"}]
	assert len(filterItems(records, {"Company": "entertainment"})) == 2


def test_number_filter_coerces_field_value():
	records = [
		{"CurrentMemberCount": 7},
		{"CurrentMemberCount": "7"},
		{"CurrentMemberCount": 4},
		{"CurrentMemberCount": "seven"},
	]
	assert len(filterItems(records, {"CurrentMemberCount": 7})) == 2


def test_none_constraints_are_ignored():
	records = [{"Gender": "M"}, {"Gender": "F"}]
	assert filterItems(records, {"Gender": None, "Country": None}) == records


def test_all_constraints_must_hold():
	records = [
		{"Gender": "F", "Company": "YG Entertainment"},
		{"Gender": "M", "Company": "YG Entertainment"},
		{"Gender": "F", "Company": "SM Entertainment"},
	]
	result = filterItems(records, {"Gender": "F", "Company": "YG"})
	assert result == [{"Gender": "F", "Company": "YG Entertainment"}]


def test_filter_preserves_order_and_input():
	records = [{"Id": 3, "Group": "BTS"}, {"Id": 1, "Group": "BTS"}, {"Id": 2, "Group": "NCT"}]
	snapshot = [dict(r) for r in records]
	result = filterItems(records, {"Group": "bts"})
	assert [r["Id"] for r in result] == [3, 1]
	assert records == snapshot


def test_nested_field_access():
	record = {"Agency": {"Name": "HYBE", "Labels": ["BigHit", "Pledis"]}}
	assert getField(record, "Agency.Name") == "HYBE"
	assert getField(record, "Agency.Labels.1") == "Pledis"
	assert getField(record, "Agency.Founder.Name") is None
	assert getField(record, "Agency.Labels.5") is None
	assert getField(None, "Name") is None
	assert filterItems([record], {"Agency.Name": "hybe"}) == [record]
