"""Ranking of metadata containers by how reliable their dates are."""

from collections.abc import Iterable
from enum import Enum

from medtool.extractor.containers import MetadataContainer


class ContainerKind(Enum):
    """Kind of metadata container; the value is its priority rank."""

    EXIF_SUB = 0
    EXIF_BASE = 1
    QUICKTIME_METADATA_HEADER = 2
    QUICKTIME_MOVIE_HEADER = 3
    OTHER = 4

    @property
    def rank(self) -> int:
        return self.value

    @property
    def tags(self) -> tuple[str, ...]:
        """Date tags to try, in order, for containers of this kind."""
        return TAG_CHAINS[self]


# exiftool family 1 group names
GROUP_KINDS: dict[str, ContainerKind] = {
    "ExifIFD": ContainerKind.EXIF_SUB,
    "IFD0": ContainerKind.EXIF_BASE,
    "IFD1": ContainerKind.EXIF_BASE,
    "SubIFD": ContainerKind.EXIF_BASE,
    "InteropIFD": ContainerKind.EXIF_BASE,
    "GlobParamIFD": ContainerKind.EXIF_BASE,
    "Keys": ContainerKind.QUICKTIME_METADATA_HEADER,
    "QuickTime": ContainerKind.QUICKTIME_MOVIE_HEADER,
}

# exiftool calls EXIF DateTimeDigitized (0x9004) CreateDate and DateTime (0x0132) ModifyDate
EXIF_DATE_TAGS = ("CreateDate", "DateTimeOriginal", "ModifyDate")

TAG_CHAINS: dict[ContainerKind, tuple[str, ...]] = {
    ContainerKind.EXIF_SUB: EXIF_DATE_TAGS,
    ContainerKind.EXIF_BASE: EXIF_DATE_TAGS,
    ContainerKind.QUICKTIME_METADATA_HEADER: ("CreationDate",),
    ContainerKind.QUICKTIME_MOVIE_HEADER: ("CreateDate",),
    ContainerKind.OTHER: (),
}


def classify(container: MetadataContainer) -> ContainerKind:
    return GROUP_KINDS.get(container.name, ContainerKind.OTHER)


def sort_containers(containers: Iterable[MetadataContainer]) -> list[MetadataContainer]:
    """Order containers from most to least reliable, keeping input order within a rank."""
    return sorted(containers, key=lambda c: classify(c).rank)
