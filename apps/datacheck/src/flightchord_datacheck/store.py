"""Load and persist the on-disk dataset."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from flightchord_core.schemas import (
    AirlineIndex,
    AirportIndex,
    AirportShard,
    CoverageManifest,
)

from .config import settings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import DatacheckSettings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _read_model(path: Path, model: type[M]) -> M:
    """Parse *path* as JSON into *model*, naming the file on failure."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc})"
        raise ValueError(msg) from exc
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        msg = f"{path}: does not match {model.__name__} ({exc.error_count()} errors)\n{exc}"
        raise ValueError(msg) from exc


class ShardStore:
    """Directory-backed access to shards, indexes and the coverage manifest.

    Layout::

        <data_dir>/airports/<IATA>.json
        <data_dir>/airports.json
        <data_dir>/airlines.json
        <data_dir>/coverage.json
    """

    def __init__(
        self,
        data_dir: Path | str | None = None,
        config: DatacheckSettings | None = None,
    ) -> None:
        self._config = config or settings
        self.data_dir = Path(data_dir) if data_dir is not None else self._config.data_dir

    @property
    def shard_dir(self) -> Path:
        return self.data_dir / self._config.airports_subdir

    def shard_path(self, code: str) -> Path:
        return self.shard_dir / f"{code}.json"

    def require_dirs(self) -> None:
        if not self.data_dir.is_dir():
            msg = f"Data directory not found: {self.data_dir}"
            raise FileNotFoundError(msg)
        if not self.shard_dir.is_dir():
            msg = f"Airports directory not found: {self.shard_dir}"
            raise FileNotFoundError(msg)

    def load_shards(self) -> dict[str, AirportShard]:
        """Load every shard, keyed by its file name (``HND.json`` -> ``HND``).

        Files are read in sorted order. The checker reports shards whose
        ``airport`` field disagrees with the key.
        """
        self.require_dirs()
        shards: dict[str, AirportShard] = {}
        for path in sorted(self.shard_dir.glob("*.json")):
            shards[path.stem] = _read_model(path, AirportShard)
        logger.debug("Loaded %d shards from %s", len(shards), self.shard_dir)
        return shards

    def load_airport_index(self) -> AirportIndex:
        path = self.data_dir / self._config.airports_index_file
        if not path.exists():
            logger.warning("Airport index %s not found, using empty index", path)
            return AirportIndex()
        return _read_model(path, AirportIndex)

    def load_airline_index(self) -> AirlineIndex:
        path = self.data_dir / self._config.airlines_index_file
        if not path.exists():
            logger.warning("Airline index %s not found, using empty index", path)
            return AirlineIndex()
        return _read_model(path, AirlineIndex)

    def load_manifest(self) -> CoverageManifest:
        path = self.data_dir / self._config.manifest_file
        if not path.exists():
            logger.warning("Coverage manifest %s not found, using empty manifest", path)
            return CoverageManifest()
        return _read_model(path, CoverageManifest)

    def write_shard(self, code: str, shard: AirportShard) -> Path:
        """Write *shard* to ``<IATA>.json`` with 2-space indent and trailing newline."""
        path = self.shard_path(code)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(shard.to_json_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.info("Updated file: %s", path.name)
        return path

    def write_shards(
        self, shards: dict[str, AirportShard], codes: Iterable[str]
    ) -> int:
        """Write back the shards named in *codes*; returns the count written."""
        written = 0
        for code in sorted(codes):
            shard = shards.get(code)
            if shard is None:
                logger.warning("No shard loaded for %s, nothing to write", code)
                continue
            self.write_shard(code, shard)
            written += 1
        return written
