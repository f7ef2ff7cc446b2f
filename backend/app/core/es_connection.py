from elasticsearch import AsyncElasticsearch
from app.core.config import Settings
from app.core.logger import logs
import logging

class AsyncSearchConnection:
    """
    Manages the asynchronous connection to the Elasticsearch cluster.
    Only used when STORAGE_MODE=elasticsearch
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: AsyncElasticsearch | None = None

    def get_client(self) -> AsyncElasticsearch:
        """Returns the shared async client, creating it on first use."""
        if self.settings.STORAGE_MODE != "elasticsearch":
            raise RuntimeError(f"Elasticsearch not available - STORAGE_MODE is set to '{self.settings.STORAGE_MODE}'")

        if self._client is None:
            # Non-blocking client; one instance is shared by every request
            self._client = AsyncElasticsearch(hosts=self.settings.es_hosts)
            logs.log(logging.INFO, f"Elasticsearch client initialized for {self.settings.es_hosts}")
        return self._client

    async def close(self):
        if self._client is not None:
            await self._client.close()
            self._client = None
            logs.log(logging.INFO, "Elasticsearch connection closed")
