from ..client import ApiClient
from ..core.parsing import parse_usage_xml
from ..models import UsageInformation
from ..sync import sync_method


class UsageClient(ApiClient):
    """Reports the conversion usage of an API key."""

    ENDPOINT_PATH = "usage/"

    async def get_usage(self, get_history: bool = False) -> UsageInformation:
        """
        Get API usage information.

        Args:
            get_history: Also return the monthly usage history

        Returns:
            UsageInformation snapshot

        Raises:
            DecodeError: If the usage document cannot be parsed
        """
        self.headers["Accept"] = "text/xml"

        if get_history:
            self.parameters["get_history"] = "True"
        else:
            self.parameters.pop("get_history", None)

        result = await self._perform_post()
        return parse_usage_xml(result.content)

    get_usage_sync = sync_method("get_usage")
