import json
import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hotel_engine.utils.custom_exceptions import InvalidSettings, StorageError

logger = logging.getLogger(__name__)

DATA_DIR = os.environ.get("HOTEL_DATA_DIR", "data")
SETTINGS_FILE = os.environ.get("HOTEL_SETTINGS_FILE")


class HotelSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vat_rate: Decimal = Field(default=Decimal("0.10"), ge=0, le=1, alias="vatRate")
    currency: str = Field(default="USD", min_length=1)
    hotel_name: str = Field(default="Grand Hotel", alias="hotelName")
    default_refund_policy: str = Field(default="TIERED", alias="defaultRefundPolicy")


def default_data_dir() -> Path:
    return Path(DATA_DIR)


def default_settings_path(data_dir: Optional[Path] = None) -> Path:
    if SETTINGS_FILE:
        return Path(SETTINGS_FILE)
    return Path(data_dir or default_data_dir()) / "settings.json"


def load_settings(path: Path) -> HotelSettings:
    path = Path(path)
    if not path.exists():
        return HotelSettings()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as err:
        logger.warning(f"Could not read settings {path}, using defaults: {err}")
        return HotelSettings()

    if not raw.strip():
        return HotelSettings()

    try:
        data = json.loads(raw, parse_float=Decimal)
        # explicit nulls mean "not set"
        if isinstance(data, dict):
            data = {key: value for key, value in data.items() if value is not None}
        return HotelSettings.model_validate(data)
    except ValidationError as err:
        formatted = "; ".join(f"{e['loc']}: {e['msg']}" for e in err.errors())
        raise InvalidSettings(f"Invalid settings in {path}: {formatted}") from err
    except ValueError as err:
        raise InvalidSettings(f"Malformed settings document {path}: {err}") from err


def save_settings(settings: HotelSettings, path: Path):
    path = Path(path)
    data = settings.model_dump(by_alias=True, mode="json")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as err:
        logger.error(f"Error saving settings to {path}: {err}")
        raise StorageError(f"Failed to save settings to {path}") from err
