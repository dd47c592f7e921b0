from collections import namedtuple
from typing import Generic, Callable, Dict, Any, Type, Mapping, TypeVar, Tuple

from marshmallow import Schema, post_load
from marshmallow.fields import Field
from toolz import merge


V = TypeVar('V')
Json = Dict[str, Any]


class JsonCodec(Generic[V]):
    def __init__(self,
                 encode: Callable[[V], Json],
                 decode: Callable[[Json], V]) -> None:
        self.__encode = encode
        self.__decode = decode

    def encode(self, value: V) -> Json:
        return self.__encode(value)

    def decode(self, value: Json) -> V:
        """Raises :class:`marshmallow.ValidationError` when `value` does not match the schema."""
        return self.__decode(value)


def codec(schema: Schema) -> JsonCodec[V]:
    return JsonCodec[V](schema.dump, schema.load)


def required(cls: Type[Field], **kwargs) -> Field:
    return cls(**merge({'required': True}, kwargs))


def optional(cls: Type[Field], **kwargs) -> Field:
    return required(
        cls,
        **merge(
            kwargs,
            {
                'load_default': None,
                'dump_default': None,
                'allow_none'  : True,
                'required'    : False
            }
        )
    )


def build(name: str,
          fields: Mapping[str, Field]) -> Tuple[type, Type[Schema]]:
    """Create a namedtuple record and the marshmallow schema that loads into it."""
    cls = namedtuple(name, fields.keys())

    @post_load
    def to_namedtuple(_, data, **kwargs):
        return cls(**data)

    schema: Type[Schema] = type(
        f'{name}Schema',
        (Schema,),
        {**fields, '_to_namedtuple': to_namedtuple}
    )

    return cls, schema
