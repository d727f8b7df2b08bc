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
Lifecycle orchestration of a single service container: provisioning
(image, network, container, start) and decommissioning (stop, remove
container, remove network).
"""
from ..MODELS.service_definition import ContainerDescriptor
from ..RUNTIME.runtime_actions import RuntimeActions, RuntimeContext
from ..UTILS.console_logger import Logger

class ServiceOrchestrator:
    """
    Drives the runtime actions for one container at a time.

    Each step runs only if the previous one succeeded. The first failing
    step's ``ContainerRuntimeError`` propagates to the caller; nothing done
    before it is rolled back.
    """
    def __init__(self, logger: Logger, actions: RuntimeActions):
        """
        Initializes the orchestrator.

        :param logger: Receives one notice per completed or skipped step.
        :param actions: The container runtime operations.
        """
        self.logger = logger
        self.actions = actions

    def service_provisioning(self, ctx: RuntimeContext, container: ContainerDescriptor) -> None:
        """
        Runs a service within a container attached to its own network.

        :param ctx: Context passed to every runtime call.
        :param container: The container to provision.
        :raises ContainerRuntimeError: From the first failing step.
        """
        self._pull_image_if_not_exists(ctx, container.image)

        network_name = container.network_name
        network_id = self.actions.create_network(ctx, network_name)
        self.logger.info("Successfully created network %s", network_name)

        container_id = self.actions.create_container_attached(
            ctx, container.image, container.name, network_id, list(container.environment_vars)
        )
        self.logger.info("Successfully created container %s", container.name)

        self.actions.start_container(ctx, container_id)
        self.logger.info("Successfully started container %s", container.name)

    def service_decommissioning(self, ctx: RuntimeContext, container: ContainerDescriptor) -> None:
        """
        Stops and removes a service container and its network.

        A container that is not running is skipped without error.

        :param ctx: Context passed to every runtime call.
        :param container: The container to decommission.
        :raises ContainerRuntimeError: From the first failing step.
        """
        container_id = self.actions.stop_container_by_name(ctx, container.name)
        if not container_id:
            self.logger.warn("Container %s not found, skipping", container.name)
            return
        self.logger.info("Successfully stopped container %s", container.name)

        self.actions.remove_container(ctx, container_id)
        self.logger.info("Successfully removed container %s", container.name)

        self.actions.remove_network_by_derived_name(ctx, container.name)
        self.logger.info("Successfully removed network %s", container.network_name)

    def _pull_image_if_not_exists(self, ctx: RuntimeContext, image: str) -> None:
        if self.actions.image_exists(ctx, image):
            self.logger.warn("Image %s already exists, skipping pull", image)
            return

        self.actions.pull_image(ctx, image)
        self.logger.info("Successfully pulled image %s", image)
