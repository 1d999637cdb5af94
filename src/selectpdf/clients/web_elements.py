from typing import List

from ..client import ApiClient
from ..core.metadata import parse_web_elements_json
from ..models import WebElement
from ..sync import sync_method


class WebElementsClient(ApiClient):
    """Retrieves the web elements positions of a finished conversion."""

    ENDPOINT_PATH = "webelements/"

    def __init__(self, api_key: str, job_id: str, **kwargs):
        super().__init__(api_key, **kwargs)
        self.parameters["job_id"] = job_id

    async def get_web_elements(self) -> List[WebElement]:
        """Get the web elements of the conversion identified by the job id.

        Raises:
            DecodeError: If the response is not a JSON array of web elements
        """
        self.headers["Accept"] = "application/json"
        result = await self._perform_post()
        return parse_web_elements_json(result.content or b"")

    get_web_elements_sync = sync_method("get_web_elements")
