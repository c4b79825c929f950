from typing import Any

from pydantic import BaseModel, ConfigDict


class ExampleHeader(BaseModel):
    """JSON object on the first line of an @example tag."""

    model_config = ConfigDict(extra="allow")

    setting: Any = None
    name: Any = None
    label: Any = None
    config: Any = None
