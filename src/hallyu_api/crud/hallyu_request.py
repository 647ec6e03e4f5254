from hallyu_api.core.config import HallyuConfig
from hallyu_api.core.data import HallyuDataContext


class HallyuRequest():
	def __init__(
			self,
			backendConfig: HallyuConfig,
			dataContext: HallyuDataContext
	):
		self.config = backendConfig
		self.data = dataContext
