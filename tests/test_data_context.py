import json

from hallyu_api.core.config import HallyuConfig
from hallyu_api.core.data import (
	HallyuDataContext,
	HallyuDataStore,
	canonicalizeRecord,
	loadDataContext,
	loadJsonFile
)
from hallyu_api.models.search import RecordKindEnum


def test_canonical_keys():
	record = canonicalizeRecord({
		"id": 9,
		"stageName": "Taeyeon",
		"dateOfBirth": "1989-03-09",
		"debutDate": "2007-08-05",
		"Agency": {"name": "SM"},
	})
	assert record == {
		"Id": 9,
		"StageName": "Taeyeon",
		"DateOfBirth": "1989-03-09",
		"Debut": "2007-08-05",
		"Agency": {"Name": "SM"},
	}


def test_first_non_empty_value_wins():
	record = canonicalizeRecord({"StageName": "", "stageName": "Taeyeon"})
	assert record["StageName"] == "Taeyeon"

	record = canonicalizeRecord({"StageName": "Kid", "stageName": "Other"})
	assert record["StageName"] == "Kid"


def test_context_canonicalizes_mixed_records(data_context):
	taeyeon = data_context.findById(RecordKindEnum.ARTIST, 5)
	assert taeyeon["StageName"] == "Taeyeon"
	assert taeyeon["Group"] == "Girls' Generation"

	nct = data_context.findById(RecordKindEnum.GROUP, "5")
	assert nct["Name"] == "NCT"
	assert nct["Debut"] == "2016-04-09"


def test_collections_are_immutable(data_context):
	assert isinstance(data_context.artists, tuple)
	assert isinstance(data_context.companies, tuple)


def test_find_by_id(data_context):
	assert data_context.findById(RecordKindEnum.ARTIST, 1)["StageName"] == "Jungkook"
	assert data_context.findById(RecordKindEnum.ACTOR, "2")["StageName"] == "Kim Go-eun"
	assert data_context.findById(RecordKindEnum.ARTIST, 99) is None
	assert data_context.findById(RecordKindEnum.ARTIST, "abc") is None


def test_generated_companies(data_context):
	companies = {company["Id"]: company for company in data_context.companies}
	assert [companies[i]["Name"] for i in sorted(companies)] == [
		"HYBE",
		"YG Entertainment",
		"SM Entertainment",
		"JYP Entertainment",
		"EDAM Entertainment",
	]

	sm = companies[3]
	assert sm["Type"] == "Major Label"
	assert sm["Founded"] == 1995
	assert sm["ArtistCount"] == 1
	assert sm["GroupCount"] == 2
	assert [group["Name"] for group in sm["Groups"]] == ["Girls' Generation", "NCT"]

	edam = companies[5]
	assert edam["Type"] == "Independent"
	assert edam["Founded"] is None
	assert edam["GroupCount"] == 0


def test_summary(data_context):
	assert data_context.summary() == {
		"artists": 6,
		"groups": 5,
		"actors": 2,
		"companies": 5,
	}
	assert str(data_context).startswith("Data loaded: 6 artists")


def test_load_missing_file(tmp_path):
	assert loadJsonFile(tmp_path / "missing.json") == []


def test_load_malformed_files(tmp_path):
	broken = tmp_path / "broken.json"
	broken.write_text("{not json", encoding="utf-8")
	assert loadJsonFile(broken) == []

	notAList = tmp_path / "object.json"
	notAList.write_text(json.dumps({"StageName": "IU"}), encoding="utf-8")
	assert loadJsonFile(notAList) == []


def test_load_data_context(test_config):
	context = loadDataContext(test_config)
	assert context.summary()["artists"] == 6
	assert context.findById(RecordKindEnum.GROUP, 2)["Name"] == "BLACKPINK"


def writeDataset(directory, artists):
	(directory / "artists.json").write_text(json.dumps(artists), encoding="utf-8")
	(directory / "groups.json").write_text("[]", encoding="utf-8")
	(directory / "actors.json").write_text("[]", encoding="utf-8")


def test_store_reload_swaps_snapshot(tmp_path):
	writeDataset(tmp_path, [{"Id": 1, "StageName": "IU"}])
	config = HallyuConfig(
		dataDir=str(tmp_path),
		artistsFile="artists.json",
		groupsFile="groups.json",
		actorsFile="actors.json"
	)

	store = HallyuDataStore(config)
	assert not store.isLoaded

	first = store.context
	assert store.isLoaded
	assert len(first.artists) == 1

	writeDataset(tmp_path, [{"Id": 1, "StageName": "IU"}, {"Id": 2, "StageName": "Jimin"}])
	second = store.reload()

	assert store.context is second
	assert len(second.artists) == 2
	# a request holding the old snapshot keeps seeing it unchanged
	assert len(first.artists) == 1


def test_store_from_context(test_config):
	context = HallyuDataContext(artists=[], groups=[], actors=[])
	store = HallyuDataStore.fromContext(test_config, context)
	assert store.isLoaded
	assert store.context is context
	assert store.context.companies == ()


def test_config_description(test_config):
	description = str(test_config)
	assert description.startswith("Hallyu API configuration:")
	assert "artists.json, groups.json, actors.json" in description
	assert "PageLimit: 20 (max 100)" in description
