"""
Models for the compose file as a whole.
"""
from typing import Dict, Any
from pydantic import BaseModel, field_validator
from .service_definition import ServiceDefinition

class ComposeFile(BaseModel):
    """
    A parsed compose file. Only the ``services`` section is meaningful,
    every other top level key is ignored.
    """
    services: Dict[str, ServiceDefinition] = {}

    @field_validator('services', mode='before')
    @classmethod
    def empty_services_as_mapping(cls, value: Any) -> Any:
        # `services:` with nothing under it
        return {} if value is None else value
