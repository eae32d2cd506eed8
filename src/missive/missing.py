from __future__ import annotations

from typing import Any, Literal, TypeGuard, TypeVar, Union, TYPE_CHECKING

from pydantic_core import CoreSchema, core_schema

if TYPE_CHECKING:
    from pydantic import GetJsonSchemaHandler, GetCoreSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


__all__ = (
    'MISSING',
    'MissingNoneOr',
    'MissingOr',
    'is_not_missing',
)


T = TypeVar('T')


class _MissingType:
    """Marks a field that was absent from the wire document.

    Distinct from `None`, which marks a field that was present with an
    explicit `null`.
    """

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(
        self,
        _: Any  # noqa: ANN401
    ) -> _MissingType:
        return self

    def __reduce__(self) -> str:
        return 'MISSING'

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.is_instance_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'null'}


def is_not_missing[V](value: V | _MissingType) -> TypeGuard[V]:
    return not isinstance(value, _MissingType)


MISSING = _MissingType()

MissingOr = Union[T, _MissingType]
MissingNoneOr = Union[T, None, _MissingType]
