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
Exception hierarchy shared by the parser, the prompt and the runtime layer.
"""
from typing import Optional


class DockCliError(Exception):
    """Base class for every error raised by dockcli."""


class ConfigError(DockCliError):
    """The compose file could not be read or is malformed."""


class SelectionError(DockCliError):
    """The interactive service selection failed or was aborted."""


class ContainerRuntimeError(DockCliError):
    """
    A container runtime operation failed.

    The underlying SDK exception, if any, is chained as ``__cause__``.
    """
    def __init__(self, action: str, reason: Optional[object] = None):
        self.action = action
        self.reason = reason
        message = f"{action} failed" if reason is None else f"{action} failed: {reason}"
        super().__init__(message)


class NotFoundError(ContainerRuntimeError):
    """A runtime resource that had to exist was not found."""
