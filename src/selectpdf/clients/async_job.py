from ..client import ApiClient
from ..models import CallResult
from ..sync import sync_method


class AsyncJobClient(ApiClient):
    """Polls the status of an asynchronous job."""

    ENDPOINT_PATH = "asyncjob/"

    def __init__(self, api_key: str, job_id: str, **kwargs):
        super().__init__(api_key, **kwargs)
        self.parameters["job_id"] = job_id

    async def get_result(self) -> CallResult:
        """Ask for the job result.

        The returned CallResult is ``finished`` once the server stops echoing
        the job id; until then its content is meaningless.
        """
        return await self._perform_post()

    get_result_sync = sync_method("get_result")
