from pydantic import BaseModel, ConfigDict


class BaseClientModel(BaseModel):
    model_config = ConfigDict(validate_assignment=True, title=None, extra="forbid")
