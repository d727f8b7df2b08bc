"""
Translation of the operator's service selection into container descriptors.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple, Union
from ..MODELS.service_definition import ContainerDescriptor, ServiceDefinition

ALL_SERVICES = "all"


@dataclass(frozen=True)
class ExpandAll:
    """The selection contains the ``all`` sentinel."""


@dataclass(frozen=True)
class Filter:
    """The selection names individual services."""
    names: Tuple[str, ...]


Selection = Union[ExpandAll, Filter]


def prompt_candidates(services: Mapping[str, ServiceDefinition]) -> List[str]:
    """
    Returns the choices offered to the operator: the ``all`` sentinel followed
    by every service name, sorted.
    """
    return [ALL_SERVICES] + sorted(services)


def classify_selection(selected: Iterable[str]) -> Selection:
    """
    Decides between expanding to every service and filtering by name.

    The sentinel absorbs every other name wherever it appears. Repeated names
    are kept once, in first-seen order.
    """
    names = list(selected)
    if ALL_SERVICES in names:
        return ExpandAll()
    return Filter(names=tuple(dict.fromkeys(names)))


def selected_services_to_containers(
    selected: Iterable[str],
    services: Mapping[str, ServiceDefinition],
) -> List[ContainerDescriptor]:
    """
    Builds one container descriptor per selected service.

    :param selected: Names picked by the operator, possibly including ``all``.
    :param services: Every service of the compose file, keyed by name.
    :return: Descriptors in orchestration order. ``all`` yields every service
        sorted by name; otherwise selection order is kept and names missing
        from ``services`` are dropped.
    """
    selection = classify_selection(selected)
    if isinstance(selection, ExpandAll):
        chosen: Dict[str, ServiceDefinition] = {name: services[name] for name in sorted(services)}
    else:
        chosen = {name: services[name] for name in selection.names if name in services}
    return [ContainerDescriptor.from_service(name, service) for name, service in chosen.items()]
