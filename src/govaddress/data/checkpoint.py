"""Durable snapshots of an entity collection for resumable runs."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from govaddress.core.models import EntityCollection

logger = logging.getLogger(__name__)

CHECKPOINT_VERSION = "1.0"


class CheckpointError(Exception):
    """A checkpoint file exists but cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unreadable checkpoint {path}: {reason}")


class CheckpointStore:
    """
    Persists an EntityCollection as pretty-printed JSON.

    Each save replaces the previous snapshot atomically: the document is
    written to a temporary file beside the target and renamed over it, so
    an interrupted write leaves the last good checkpoint in place.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize store.

        Args:
            path: Path to the checkpoint JSON file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, collection: EntityCollection) -> None:
        """Write a full snapshot of the collection."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"version": CHECKPOINT_VERSION, **collection.to_dict()}

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(
            "Checkpoint saved to %s (%d/%d resolved)",
            self.path,
            len(collection.resolved()),
            len(collection.entities),
        )

    def load(self) -> Optional[EntityCollection]:
        """
        Load the last snapshot.

        Returns:
            The collection, or None if no checkpoint exists

        Raises:
            CheckpointError: If the file is not a valid checkpoint document
        """
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CheckpointError(self.path, f"invalid JSON ({e})") from e

        if not isinstance(raw, dict):
            raise CheckpointError(self.path, "document is not an object")
        version = raw.get("version")
        if version != CHECKPOINT_VERSION:
            raise CheckpointError(self.path, f"unsupported version {version!r}")

        try:
            collection = EntityCollection.from_dict(raw)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise CheckpointError(self.path, f"malformed document ({e})") from e

        logger.info("Loaded checkpoint %s with %d entities", self.path, len(collection.entities))
        return collection

    def clear(self) -> None:
        """Delete the checkpoint file if present."""
        self.path.unlink(missing_ok=True)
