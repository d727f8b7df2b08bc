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
The container runtime boundary: the primitive operations the orchestrator
composes into provisioning and decommissioning.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass
class RuntimeContext:
    """
    Token passed to every runtime call.

    Carries the API timeout and a cancellation flag so callers can hand a
    deadline down to the runtime client. The orchestrator itself never
    enforces either.
    """

    timeout: Optional[float] = None
    cancelled: bool = field(default=False, init=False)

    def cancel(self) -> None:
        """Marks the context as cancelled."""
        self.cancelled = True


class RuntimeActions(Protocol):
    """
    Primitive container runtime operations.

    Every method raises ``ContainerRuntimeError`` when the runtime call fails.
    """

    def image_exists(self, ctx: RuntimeContext, image: str) -> bool:
        """Returns True when ``image`` is present locally."""
        ...

    def pull_image(self, ctx: RuntimeContext, image: str) -> None:
        """Pulls ``image``, streaming progress to standard output."""
        ...

    def create_network(self, ctx: RuntimeContext, name: str) -> str:
        """Creates a network and returns its id."""
        ...

    def create_container_attached(
        self,
        ctx: RuntimeContext,
        image: str,
        name: str,
        network_id: str,
        env: List[str],
    ) -> str:
        """Creates a container, connects it to ``network_id`` and returns its id."""
        ...

    def start_container(self, ctx: RuntimeContext, container_id: str) -> None:
        ...

    def stop_container_by_name(self, ctx: RuntimeContext, name: str) -> str:
        """Stops the running container called ``name``; returns its id, or "" if none runs."""
        ...

    def remove_container(self, ctx: RuntimeContext, container_id: str) -> None:
        ...

    def remove_network_by_derived_name(self, ctx: RuntimeContext, name: str) -> None:
        """Removes the network ``{name}-network``."""
        ...
