from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError
    from pydantic_core import ErrorDetails


__all__ = (
    'BaseMissiveException',
    'DecodeError',
    'DepthExceeded',
    'MissingRequiredField',
    'SchemaError',
    'TypeMismatch',
    'from_validation_error',
    'wire_type_name',
)


class BaseMissiveException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class DecodeError(BaseMissiveException):
    """Base for every failure to turn a wire document into a model.

    `path` locates the offending value in the original document, e.g.
    `message.embeds[2].fields[0].value`.
    """

    def __init__(self, detail: str, path: str) -> None:
        self.detail = detail
        self.path = path
        super().__init__(f'{detail} at {path}')


class MissingRequiredField(DecodeError):
    def __init__(self, name: str, path: str) -> None:
        self.name = name
        super().__init__(f'missing required field `{name}`', path)


class TypeMismatch(DecodeError):
    def __init__(self, expected: str, found: str, path: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f'expected {expected}, found {found}', path)


class SchemaError(DecodeError):
    """Unrecognized discriminant, raised only in strict mode."""

    def __init__(self, discriminant: Any, path: str) -> None:  # noqa: ANN401
        self.discriminant = discriminant
        super().__init__(
            f'unrecognized discriminant {discriminant!r}', path)


class DepthExceeded(DecodeError):
    def __init__(self, max_depth: int, path: str) -> None:
        self.max_depth = max_depth
        super().__init__(
            f'component nesting deeper than {max_depth}', path)


# ? pydantic error type -> wire type name
_EXPECTED = {
    'string_type': 'string',
    'int_type': 'integer',
    'int_parsing': 'integer',
    'int_from_float': 'integer',
    'bool_type': 'boolean',
    'bool_parsing': 'boolean',
    'float_type': 'number',
    'float_parsing': 'number',
    'list_type': 'array',
    'dict_type': 'object',
    'model_type': 'object',
    'model_attributes_type': 'object',
    'datetime_type': 'timestamp',
    'datetime_parsing': 'timestamp',
    'datetime_from_date_parsing': 'timestamp',
    'timezone_aware': 'timezone aware timestamp',
    'none_required': 'null',
    'greater_than_equal': 'non-negative integer',
}


def wire_type_name(value: Any) -> str:  # noqa: ANN401
    match value:
        case None:
            return 'null'
        case bool():
            return 'boolean'
        case int():
            return 'integer'
        case float():
            return 'number'
        case str():
            return 'string'
        case Mapping():
            return 'object'
        case Sequence():
            return 'array'

    return type(value).__name__


def _is_noise(error: ErrorDetails) -> bool:
    # ? every MissingOr field is a union with the sentinel type,
    # ? its failed branch says nothing about the document
    return (
        error['type'] == 'is_instance_of' and
        error.get('ctx', {}).get('class') == '_MissingType'
    )


def _build_path(
    root: str,
    loc: tuple[int | str, ...],
    document: Any,  # noqa: ANN401
    missing: bool
) -> str:
    path, node = root, document

    for index, part in enumerate(loc):
        if (
            isinstance(node, Mapping) and
            isinstance(part, str) and
            part in node
        ):
            path += f'.{part}'
            node = node[part]
            continue

        if (
            isinstance(node, Sequence) and
            not isinstance(node, str) and
            isinstance(part, int) and
            0 <= part < len(node)
        ):
            path += f'[{part}]'
            node = node[part]
            continue

        # ? anything else is a union member or tag label
        if missing and index == len(loc) - 1 and isinstance(part, str):
            path += f'.{part}'

    return path


def from_validation_error(
    error: ValidationError,
    document: Any,  # noqa: ANN401
    root: str
) -> DecodeError:
    errors = error.errors()

    detail = next(
        (e for e in errors if not _is_noise(e)),
        errors[0]
    )

    ctx = detail.get('ctx', {})

    match detail['type']:
        case 'missing':
            return MissingRequiredField(
                str(detail['loc'][-1]),
                _build_path(root, detail['loc'], document, missing=True)
            )
        case 'union_tag_not_found':
            # ? only component unions can fail to find a tag
            return MissingRequiredField(
                'type',
                _build_path(root, detail['loc'], document, missing=False)
                + '.type'
            )
        case 'schema_error':
            return SchemaError(
                ctx.get('discriminant'),
                _build_path(root, detail['loc'], document, missing=False)
            )

    return TypeMismatch(
        ctx.get('expected', _EXPECTED.get(detail['type'], detail['msg'])),
        ctx.get('found', wire_type_name(detail['input'])),
        _build_path(root, detail['loc'], document, missing=False)
    )
