from tailwind_groups.adapters.base import AttributeAdapter, RawValue
from tailwind_groups.adapters.mapping import MappingAdapter
from tailwind_groups.adapters.soup import DIALECTS, SoupAdapter, SoupAttribute, split_mustache

__all__ = [
    "AttributeAdapter",
    "RawValue",
    "MappingAdapter",
    "SoupAdapter",
    "SoupAttribute",
    "DIALECTS",
    "split_mustache",
]
