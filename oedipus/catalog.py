"""Groups a module's types by namespace and keeps the documentable ones."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from .models import NamespaceGroup, TypeDescriptor, TypeKind


def is_documentable(descriptor: TypeDescriptor) -> bool:
    """Return True for public, non-generic classes.

    doxygenclass cannot document interfaces or open generic definitions.
    """
    return (
        descriptor.is_public
        and descriptor.kind is TypeKind.CLASS
        and not descriptor.is_generic_definition
    )


class TypeCatalog:
    """Pure grouping of type descriptors into namespace groups."""

    def group(self, types: Iterable[TypeDescriptor]) -> List[NamespaceGroup]:
        """Return one group per namespace that has at least one documentable type.

        Types without a namespace are dropped. Groups follow first-seen order;
        callers impose their own ordering.
        """
        if types is None:
            raise TypeError("types must not be None")

        grouped: Dict[str, List[TypeDescriptor]] = defaultdict(list)
        for descriptor in types:
            if not descriptor.namespace:
                continue
            members = grouped[descriptor.namespace]
            if is_documentable(descriptor):
                members.append(descriptor)

        return [
            NamespaceGroup(namespace=namespace, types=tuple(members))
            for namespace, members in grouped.items()
            if members
        ]


__all__ = ["TypeCatalog", "is_documentable"]
