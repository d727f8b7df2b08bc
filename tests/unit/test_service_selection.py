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
Unit tests for mapping a service selection to container descriptors.
"""
import pytest
from dockcli.MANAGERS.service_selection import (
    ALL_SERVICES,
    ExpandAll,
    Filter,
    classify_selection,
    prompt_candidates,
    selected_services_to_containers,
)
from dockcli.MODELS.service_definition import ContainerDescriptor, ServiceDefinition


SERVICES = {
    "nginx": ServiceDefinition(image="nginx:alpine"),
    "db": ServiceDefinition(image="mysql:latest", environment={"MYSQL_ALLOW_EMPTY_PASSWORD": "true"}),
    "cache": ServiceDefinition(image="memcached"),
    "wordpress": ServiceDefinition(image="wordpress:6.0"),
}


class TestClassifySelection:
    """Tests for classify_selection."""

    def test_sentinel_expands(self):
        assert classify_selection(["nginx", ALL_SERVICES]) == ExpandAll()

    def test_names_filter(self):
        assert classify_selection(["db", "nginx", "db"]) == Filter(names=("db", "nginx"))

    def test_empty(self):
        assert classify_selection([]) == Filter(names=())


class TestSelectedServicesToContainers:
    """Tests for selected_services_to_containers."""

    def test_single_service(self):
        """Test selecting one service without environment."""
        containers = selected_services_to_containers(["nginx"], SERVICES)
        assert containers == [ContainerDescriptor(name="nginx", image="nginx:alpine", environment_vars=[])]

    def test_environment_is_flattened(self):
        """Test that environment maps become KEY=VALUE strings."""
        containers = selected_services_to_containers(["db"], SERVICES)
        assert containers[0].environment_vars == ["MYSQL_ALLOW_EMPTY_PASSWORD=true"]

    @pytest.mark.parametrize("selection", [
        [ALL_SERVICES],
        [ALL_SERVICES, "nginx"],
        ["nginx", ALL_SERVICES],
        ["db", "nginx", ALL_SERVICES, "unknown"],
    ])
    def test_sentinel_absorbs_other_names(self, selection):
        """Test that 'all' yields each service exactly once wherever it appears."""
        containers = selected_services_to_containers(selection, SERVICES)
        names = [c.name for c in containers]
        assert names == sorted(SERVICES)

    def test_unknown_names_dropped(self):
        """Test that names missing from the compose file are ignored."""
        containers = selected_services_to_containers(["ghost", "cache", "phantom"], SERVICES)
        assert [c.name for c in containers] == ["cache"]

    def test_selection_order_kept(self):
        containers = selected_services_to_containers(["wordpress", "db"], SERVICES)
        assert [c.name for c in containers] == ["wordpress", "db"]

    def test_nothing_selected(self):
        assert selected_services_to_containers([], SERVICES) == []

    def test_all_on_empty_compose_file(self):
        assert selected_services_to_containers([ALL_SERVICES], {}) == []


def test_prompt_candidates_start_with_sentinel():
    assert prompt_candidates(SERVICES) == [ALL_SERVICES, "cache", "db", "nginx", "wordpress"]


def test_network_name_is_derived():
    assert ContainerDescriptor(name="db", image="mysql").network_name == "db-network"
