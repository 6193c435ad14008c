from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

# Field types the host form renderer understands.
STRING = "string"
NUMBER = "number"
OPTIONS = "options"
COLLECTION = "collection"


@dataclass(frozen=True)
class FieldOption:
    name: str
    value: Any
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name, "value": self.value}
        if self.description:
            d["description"] = self.description
        return d


@dataclass(frozen=True)
class DisplayOptions:
    # selector name -> allowed values; every entry must match for the field to show
    show: Tuple[Tuple[str, Tuple[Any, ...]], ...] = ()

    @classmethod
    def when(cls, **conditions: Iterable[Any]) -> "DisplayOptions":
        return cls(show=tuple((k, tuple(v)) for k, v in conditions.items()))

    def matches(self, values: Mapping[str, Any]) -> bool:
        return all(values.get(name) in allowed for name, allowed in self.show)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    display_name: str
    type: str
    default: Any = ""
    required: bool = False
    description: str = ""
    placeholder: str = ""
    options: Tuple[Any, ...] = ()
    display_options: Optional[DisplayOptions] = None
    type_options: Tuple[Tuple[str, Any], ...] = field(default=())

    def is_visible(self, values: Mapping[str, Any]) -> bool:
        if self.display_options is None:
            return True
        return self.display_options.matches(values)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "displayName": self.display_name,
            "name": self.name,
            "type": self.type,
            "default": dict(self.default) if isinstance(self.default, Mapping) else self.default,
        }
        if self.required:
            d["required"] = True
        if self.placeholder:
            d["placeholder"] = self.placeholder
        if self.description:
            d["description"] = self.description
        if self.type_options:
            d["typeOptions"] = dict(self.type_options)
        if self.options:
            d["options"] = [o.to_dict() for o in self.options]
        if self.display_options is not None:
            d["displayOptions"] = {"show": {k: list(v) for k, v in self.display_options.show}}
        return d


def visible_fields(fields: Iterable[FieldSpec], values: Mapping[str, Any]) -> List[FieldSpec]:
    return [f for f in fields if f.is_visible(values)]


def field_defaults(fields: Iterable[FieldSpec]) -> Dict[str, Any]:
    return {f.name: f.default for f in fields}
