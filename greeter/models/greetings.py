# greeter/models/greetings.py

from typing import Any

from pydantic import BaseModel, model_validator


class GreetingRequest(BaseModel):
    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def match_name_key(cls, data: Any) -> Any:
        # Keys match case-insensitively; an exact "Name" wins.
        if not isinstance(data, dict):
            return data
        if "Name" in data:
            return {"name": data["Name"]}
        for key, value in data.items():
            if key.lower() == "name":
                return {"name": value}
        return {}
