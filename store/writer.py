"""Persist fetch-step output as the JSON documents the generator reads."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from exceptions.custom import OutputWriteError
from models.hotel import AggregateIndex, NeighborhoodListing
from store.loader import ALL_HOTELS_FILE, HOTELS_DIR

logger = logging.getLogger(__name__)


def to_json(model: BaseModel) -> str:
    data = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_json(path: Path, model: BaseModel) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_json(model), encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"cannot write data file: {e}", path=str(path)) from e


def save_listing(data_dir: Path, listing: NeighborhoodListing) -> Path:
    path = Path(data_dir) / HOTELS_DIR / f"{listing.id}.json"
    write_json(path, listing)
    logger.info(f"Saved {listing.hotel_count} hotels for {listing.name}")
    return path


def save_index(data_dir: Path, index: AggregateIndex) -> Path:
    path = Path(data_dir) / ALL_HOTELS_FILE
    write_json(path, index)
    return path
