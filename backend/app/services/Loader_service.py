"""
Startup provisioning for the places index.

The index is dropped and rebuilt from the tab-separated source file on every
start; there is no incremental load.
"""
import csv
import logging
from elasticsearch import AsyncElasticsearch, ApiError, TransportError

from app.core.errors import LoadError
from app.core.logger import logs
from app.repos.places_repo import INDEX_MAPPINGS

MIN_FIELDS = 6

def parse_coordinate(raw: str) -> float:
    """Coordinates that do not parse are loaded as 0.0 instead of failing the row."""
    try:
        return float(raw)
    except ValueError:
        logs.log(logging.WARNING, f"Unparseable coordinate '{raw}', loading as 0.0")
        return 0.0

def row_to_document(row: list[str]) -> dict:
    # Column 4 holds the longitude and column 5 the latitude
    return {
        "id": row[0],
        "name": row[1],
        "address": row[2],
        "phone": row[3],
        "location": {
            "lat": parse_coordinate(row[5]),
            "lon": parse_coordinate(row[4]),
        },
    }

def read_places(source_path: str) -> list[dict]:
    """Parse the source file into place documents, skipping the header row."""
    try:
        with open(source_path, "r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f, delimiter="\t"))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"error reading {source_path}: {e}") from e

    documents = []
    for line_no, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if len(row) < MIN_FIELDS:
            raise LoadError(
                f"error reading {source_path}: line {line_no} has {len(row)} fields, expected at least {MIN_FIELDS}"
            )
        documents.append(row_to_document(row))
    return documents


class DataLoader:
    def __init__(self, client: AsyncElasticsearch, index: str = "places"):
        self.client = client
        self.index = index

    async def delete_index(self):
        """Drops the index; a missing index is fine."""
        try:
            await self.client.options(ignore_status=404).indices.delete(index=self.index)
        except (ApiError, TransportError) as e:
            raise LoadError(f"error deleting index {self.index}: {e}") from e
        logs.log(logging.INFO, f"Index '{self.index}' dropped")

    async def create_index(self):
        try:
            await self.client.indices.create(index=self.index, mappings=INDEX_MAPPINGS)
        except (ApiError, TransportError) as e:
            raise LoadError(f"error creating index {self.index}: {e}") from e
        logs.log(logging.INFO, f"Index '{self.index}' created")

    async def bulk_load(self, documents: list[dict]) -> int:
        """Index every document by id in a single bulk request."""
        if not documents:
            logs.log(logging.WARNING, "No data rows to load, skipping bulk request")
            return 0

        operations = []
        for doc in documents:
            operations.append({"index": {"_index": self.index, "_id": doc["id"]}})
            operations.append(doc)

        try:
            response = await self.client.bulk(operations=operations, refresh="wait_for")
        except (ApiError, TransportError) as e:
            raise LoadError(f"error executing bulk request: {e}") from e

        body = getattr(response, "body", response)
        if not isinstance(body, dict):
            raise LoadError("bulk request error: response is not an object")
        if body.get("errors"):
            raise LoadError(f"bulk request error: {_first_item_error(body)}")

        logs.log(logging.INFO, f"Bulk loaded {len(documents)} places into '{self.index}'")
        return len(documents)

    async def provision_and_load(self, source_path: str) -> int:
        await self.delete_index()
        await self.create_index()
        documents = read_places(source_path)
        return await self.bulk_load(documents)


def _first_item_error(body: dict):
    for item in body.get("items") or []:
        for action, result in item.items():
            if isinstance(result, dict) and result.get("error"):
                return f"{action} {result.get('_id')}: {result['error']}"
    return "one or more rows failed"
