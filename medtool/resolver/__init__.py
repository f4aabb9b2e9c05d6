"""Creation date resolution from embedded metadata."""

from medtool.resolver.priority import (
    ContainerKind,
    TAG_CHAINS,
    classify,
    sort_containers,
)
from medtool.resolver.resolver import (
    creation_datetime_from_container,
    creation_datetime_from_containers,
    get_creation_datetime,
)

__all__ = [
    "ContainerKind",
    "TAG_CHAINS",
    "classify",
    "sort_containers",
    "creation_datetime_from_container",
    "creation_datetime_from_containers",
    "get_creation_datetime",
]
