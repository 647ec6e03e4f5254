from fastapi import Depends, Request

from hallyu_api.core.data import HallyuDataStore
from hallyu_api.crud.actor import HallyuActorRequest
from hallyu_api.crud.artist import HallyuArtistRequest
from hallyu_api.crud.company import HallyuCompanyRequest
from hallyu_api.crud.group import HallyuGroupRequest
from hallyu_api.crud.search import HallyuSearchRequest
from hallyu_api.crud.statistics import HallyuStatisticsRequest


def getDataStore(request: Request) -> HallyuDataStore:
	""" The data store created at application start up
	"""
	return request.app.state.dataStore


def requestFactory(requestClass):
	# each request works against the snapshot current when it started
	def buildRequest(dataStore: HallyuDataStore = Depends(getDataStore)):
		return requestClass(dataStore.config, dataStore.context)
	return buildRequest


getArtistRequest = requestFactory(HallyuArtistRequest)
getGroupRequest = requestFactory(HallyuGroupRequest)
getActorRequest = requestFactory(HallyuActorRequest)
getCompanyRequest = requestFactory(HallyuCompanyRequest)
getSearchRequest = requestFactory(HallyuSearchRequest)
getStatisticsRequest = requestFactory(HallyuStatisticsRequest)
