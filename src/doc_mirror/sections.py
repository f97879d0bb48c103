from dataclasses import dataclass, field
from typing import Iterable, List

from doc_mirror.constants import DEFAULT_SECTION


@dataclass
class SectionGroup:
    section: str
    items: List = field(default_factory=list)


def group_by_section(entries: Iterable) -> List[SectionGroup]:
    """
    Group entries by section for the navigation sidebar.

    Sections keep the order in which they first appear, entries keep their
    manifest order. Entries without a section go under "Other" at the
    position of the first such entry.
    """
    groups: List[SectionGroup] = []
    by_name = {}

    for entry in entries:
        section = entry.section or DEFAULT_SECTION
        if section not in by_name:
            by_name[section] = SectionGroup(section)
            groups.append(by_name[section])
        by_name[section].items.append(entry)

    return groups
