"""
Models for manifest services and the containers derived from them.
"""
import os
from typing import List, Dict, Any
from pydantic import BaseModel, ConfigDict, field_validator

NETWORK_SUFFIX = "-network"


def derive_network_name(container_name: str) -> str:
    """
    Returns the name of the isolated network owned by a container.

    A container named ``N`` always lives on the network ``N-network``; this is
    the only link between the two, nothing else is stored.
    """
    return f"{container_name}{NETWORK_SUFFIX}"


class ServiceDefinition(BaseModel):
    """
    A single service entry of the compose file.
    """
    model_config = ConfigDict(frozen=True)

    image: str
    environment: Dict[str, str] = {}

    @field_validator('environment', mode='before')
    @classmethod
    def normalize_environment(cls, value: Any) -> Dict[str, str]:
        """
        Accepts both compose forms: a mapping or a list of ``KEY=VALUE`` strings.
        A bare ``KEY`` list entry takes its value from the host environment and
        is left out when the host does not define it.
        """
        if value is None:
            return {}
        if isinstance(value, list):
            environment = {}
            for entry in value:
                key, sep, val = str(entry).partition('=')
                if not key:
                    raise ValueError(f"environment entry {entry!r} has no name")
                if sep:
                    environment[key] = val
                elif key in os.environ:
                    environment[key] = os.environ[key]
            return environment
        if isinstance(value, dict):
            return {str(k): _scalar_to_str(v) for k, v in value.items()}
        return value


def _scalar_to_str(value: Any) -> str:
    # YAML turns `true` into a bool, compose keeps it lower case
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class ContainerDescriptor(BaseModel):
    """
    A service resolved for orchestration: the container name, its image and
    the flattened ``KEY=VALUE`` environment.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    environment_vars: List[str] = []

    @property
    def network_name(self) -> str:
        return derive_network_name(self.name)

    @classmethod
    def from_service(cls, name: str, service: ServiceDefinition) -> "ContainerDescriptor":
        """
        Builds the descriptor for the service registered under ``name``.

        :param name: Service name, used as the container name.
        :param service: The parsed service definition.
        :return: A new descriptor.
        """
        return cls(
            name=name,
            image=service.image,
            environment_vars=[f"{key}={value}" for key, value in service.environment.items()],
        )
