from __future__ import annotations

from typing import Any, Type, TypeVar, cast

from mashumaro.config import BaseConfig
from mashumaro.mixins.dict import DataClassDictMixin

try:
    import orjson

    def json_loader(value: bytes | str) -> dict[str, Any]:
        return cast(dict[str, Any], orjson.loads(value))

    def json_dumper_to_str(value: dict[str, Any], indent: bool = False) -> str:
        if indent:
            return orjson.dumps(
                value,
                option=orjson.OPT_INDENT_2,
            ).decode(encoding="utf-8")
        else:
            return orjson.dumps(value).decode(encoding="utf-8")

except ImportError:
    import json

    def json_loader(value: bytes | str) -> dict[str, Any]:
        return cast(dict[str, Any], json.loads(value))

    def json_dumper_to_str(value: dict[str, Any], indent: bool = False) -> str:
        if indent:
            return json.dumps(value, indent=2)
        else:
            return json.dumps(value)


T = TypeVar("T", bound="DataClassSerializeMixin")


class DataClassSerializeMixin(DataClassDictMixin):
    __slots__ = ()

    class Config(BaseConfig):
        # Leaves have no `nodes` and composites have no `token`
        omit_none = True

    def as_dict(self) -> dict[str, Any]:
        """Serialize this object to a dictionary.

        Returns:
            dict[str, Any]: The serialized object.

        """
        return self.to_dict()

    @classmethod
    def as_obj(cls: Type[T], value: dict[str, Any]) -> T:
        """Deserialize a dictionary to an object.

        Args:
            value (dict[str, Any]): The serialized object.

        Returns:
            T: The deserialized object.

        """
        return cls.from_dict(value)

    def to_json(self, *, indent: bool = False) -> str:
        """Serialize this object to JSON (as a string).

        Args:
            indent (bool, optional): If True, the JSON will be indented. Defaults to False.

        Returns:
            str: The serialized object.

        """
        return json_dumper_to_str(self.as_dict(), indent=indent)

    @classmethod
    def from_json(cls: Type[T], value: bytes | str) -> T:
        """Deserialize this object from JSON (as bytes or str).

        Args:
            value (bytes | str): The serialized object.

        Returns:
            T: The deserialized object.

        """
        return cls.as_obj(json_loader(value))
