# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Runtime actions backed by the Docker Engine API (docker SDK for Python).
"""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import click
import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from .runtime_actions import RuntimeContext
from ..MODELS.service_definition import derive_network_name
from ..errors import ContainerRuntimeError, NotFoundError


@contextmanager
def _docker_call(action: str) -> Iterator[None]:
    """
    Re-raises Docker SDK failures as ``ContainerRuntimeError``.

    Transport errors (daemon gone, read timeout) come out of docker-py as raw
    ``requests`` exceptions and are wrapped the same way.
    """
    try:
        yield
    except (DockerException, RequestException) as e:
        raise ContainerRuntimeError(action, e) from e


def _exact_match(items: List[Any], name: str) -> Optional[Any]:
    # name filters match substrings, only the exact name is ours
    for item in items:
        if item.name == name:
            return item
    return None


class DockerRuntimeActions:
    """
    Implements the runtime actions on top of a ``docker.DockerClient``.
    """

    def __init__(self, client: docker.DockerClient):
        """
        Args:
            client: A connected Docker client, e.g. from ``docker.from_env()``.
        """
        self.client = client

    @classmethod
    def from_env(cls, ctx: RuntimeContext) -> "DockerRuntimeActions":
        """
        Connects to the daemon configured by the standard Docker environment
        variables (DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH).

        Args:
            ctx: Runtime context; its timeout becomes the API timeout.

        Returns:
            A new DockerRuntimeActions instance.
        """
        kwargs: Dict[str, Any] = {}
        if ctx.timeout is not None:
            kwargs["timeout"] = ctx.timeout
        with _docker_call("connect to docker daemon"):
            client = docker.from_env(**kwargs)
        return cls(client)

    def _ensure_active(self, ctx: RuntimeContext, action: str) -> None:
        if ctx.cancelled:
            raise ContainerRuntimeError(action, "context cancelled")

    def image_exists(self, ctx: RuntimeContext, image: str) -> bool:
        self._ensure_active(ctx, "list images")
        with _docker_call(f"list images for {image}"):
            images = self.client.images.list(filters={"reference": image})
        return len(images) == 1

    def pull_image(self, ctx: RuntimeContext, image: str) -> None:
        self._ensure_active(ctx, "pull image")
        with _docker_call(f"pull image {image}"):
            for event in self.client.api.pull(image, stream=True, decode=True):
                if "error" in event:
                    raise ContainerRuntimeError(f"pull image {image}", event["error"])
                click.echo(self._format_pull_event(event))

    @staticmethod
    def _format_pull_event(event: Dict[str, Any]) -> str:
        parts = [event.get("id"), event.get("status"), event.get("progress")]
        line = " ".join(str(p) for p in parts[1:] if p)
        return f"{parts[0]}: {line}" if parts[0] else line

    def create_network(self, ctx: RuntimeContext, name: str) -> str:
        self._ensure_active(ctx, "create network")
        with _docker_call(f"create network {name}"):
            network = self.client.networks.create(name)
        return network.id

    def create_container_attached(
        self,
        ctx: RuntimeContext,
        image: str,
        name: str,
        network_id: str,
        env: List[str],
    ) -> str:
        self._ensure_active(ctx, "create container")
        with _docker_call(f"create container {name}"):
            container = self.client.containers.create(image, name=name, environment=list(env))

        # The created container is left in place if the attach fails.
        with _docker_call(f"connect container {name} ({container.id}) to network {network_id}"):
            self.client.api.connect_container_to_network(container.id, network_id)
        return container.id

    def start_container(self, ctx: RuntimeContext, container_id: str) -> None:
        self._ensure_active(ctx, "start container")
        with _docker_call(f"start container {container_id}"):
            self.client.api.start(container_id)

    def stop_container_by_name(self, ctx: RuntimeContext, name: str) -> str:
        self._ensure_active(ctx, "stop container")
        with _docker_call(f"list containers named {name}"):
            containers = self.client.containers.list(filters={"name": name})
        container = _exact_match(containers, name)
        if container is None:
            return ""

        with _docker_call(f"stop container {name}"):
            container.stop()
        return container.id

    def remove_container(self, ctx: RuntimeContext, container_id: str) -> None:
        self._ensure_active(ctx, "remove container")
        with _docker_call(f"remove container {container_id}"):
            self.client.api.remove_container(container_id)

    def remove_network_by_derived_name(self, ctx: RuntimeContext, name: str) -> None:
        self._ensure_active(ctx, "remove network")
        network_name = derive_network_name(name)
        with _docker_call(f"list networks named {network_name}"):
            networks = self.client.networks.list(names=[network_name])
        network = _exact_match(networks, network_name)
        if network is None:
            raise NotFoundError(f"remove network {network_name}", "no such network")

        with _docker_call(f"remove network {network_name}"):
            network.remove()
