"""Run the address pipeline over pages saved to disk.

Expects one text file per page, one text node per line, laid out as
<pages_dir>/<last_name>/<url_path>.txt (the empty path is index.txt).
"""

import asyncio
import logging
import sys
from pathlib import Path

from govaddress import (
    AddressPipeline,
    CheckpointStore,
    Entity,
    EntityCollection,
    StandardizationClient,
)


class DirectorySource:
    """PageSource backed by saved page text."""

    def __init__(self, pages_dir: Path):
        self.pages_dir = pages_dir

    async def fetch_lines(self, entity, url_path):
        path = self.pages_dir / entity.last_name / f"{url_path or 'index'}.txt"
        if not path.exists():
            return None
        return path.read_text().splitlines()


async def main(pages_dir: Path, checkpoint_path: Path):
    collection = EntityCollection(
        name="U.S. House of Representatives",
        entities=[
            Entity.from_full_name(name, url=f"https://{name.split()[-1].lower()}.house.gov")
            for name in ["Jane Doe", "John Roe"]
        ],
    )

    async with StandardizationClient() as client:
        pipeline = AddressPipeline(
            source=DirectorySource(pages_dir),
            client=client,
            checkpoint=CheckpointStore(checkpoint_path),
        )
        result = await pipeline.run(collection)

    print(f"Resolved {len(result.resolved())} of {len(result.entities)}")
    for entity in result.pending():
        print(f"  Pending: {entity.display_name}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(Path(sys.argv[1]), Path(sys.argv[2])))
