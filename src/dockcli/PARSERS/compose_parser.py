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
Parser for compose-style service manifests.
"""
import yaml
from typing import Dict
from pydantic import ValidationError
from ..MODELS.orchestration_config import ComposeFile
from ..MODELS.service_definition import ServiceDefinition
from ..errors import ConfigError

class ComposeParser:
    """
    Parser for compose files. Reads the ``services`` section, keeping for
    each service its image and environment.
    """
    def parse(self, compose_path: str) -> Dict[str, ServiceDefinition]:
        """
        Parses a compose file from a path.

        :param compose_path: Path to the compose file.
        :return: Service definitions keyed by service name.
        :raises ConfigError: If the file cannot be read or is malformed.
        """
        try:
            with open(compose_path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"error reading YAML file {compose_path}: {e}") from e
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> Dict[str, ServiceDefinition]:
        """
        Parses a compose file from a string.

        :param content: YAML content of the compose file.
        :return: Service definitions keyed by service name.
        :raises ConfigError: If the content is not a valid compose document.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}") from e

        if not data:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"expected a mapping at the top level, got {type(data).__name__}")

        try:
            compose = ComposeFile.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"invalid compose file: {e}") from e
        return dict(compose.services)
