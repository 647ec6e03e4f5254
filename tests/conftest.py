import os
import json
import pytest

from hallyu_api.core.config import HallyuConfig
from hallyu_api.core.data import HallyuDataContext, HallyuDataStore


def load_test_data(filename):
	filepath = os.path.join(os.path.dirname(__file__), "data", filename)
	with open(filepath, 'r', encoding='utf-8') as f:
		return json.load(f)


@pytest.fixture(scope="module")
def test_config():
	return HallyuConfig(
		dataDir=os.path.join(os.path.dirname(__file__), "data"),
		artistsFile="artists.json",
		groupsFile="groups.json",
		actorsFile="actors.json"
	)


@pytest.fixture(scope="module")
def data_context():
	return HallyuDataContext(
		artists=load_test_data("artists.json"),
		groups=load_test_data("groups.json"),
		actors=load_test_data("actors.json")
	)


@pytest.fixture(scope="module")
def data_store(test_config, data_context):
	return HallyuDataStore.fromContext(test_config, data_context)
