from typing import Optional

from pydantic import BaseModel, ConfigDict


class SumoConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    # --- instance properties
    ami: Optional[str] = None
    instance_size: Optional[str] = None

    # --- aws properties
    access_id: Optional[str] = None
    access_secret: Optional[str] = None
    region: str = "us-east-1"
