from typing import Optional


class HallyuResponse():
	def __init__(
		self,
		success: bool,
		statusCode: int,
		model=None,
		error: Optional[dict] = None,
		message: Optional[str] = None,
		meta: Optional[dict] = None
	):
		self.model = model
		self.success = success
		self.statusCode = statusCode
		self.error = error or {}
		self.message = message
		self.meta = meta or {}
