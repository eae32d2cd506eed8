from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple
from re import sub

from pydantic import ValidationError
from orjson import dumps, loads, JSONDecodeError
import logfire

from .errors import (
    from_validation_error,
    DepthExceeded,
    DecodeError,
    SchemaError,
    TypeMismatch
)
from .models import Message, MessageComponent, RawBaseModel, UnknownComponent
from .builders import BuilderModel
from .enums import ComponentType, DecodeMode
from .env import env


__all__ = (
    'UnknownDiscriminant',
    'decode',
    'decode_json',
    'encode',
    'encode_json',
    'scan_components',
)


class UnknownDiscriminant(NamedTuple):
    discriminant: int
    path: str


def _root_name(model: type[RawBaseModel]) -> str:
    # ? MessageReference -> message_reference
    return sub(r'(?<!^)(?=[A-Z])', '_', model.__name__).lower()


def _scan_component(
    component: Any,  # noqa: ANN401
    depth: int,
    max_depth: int,
    path: str,
    unknown: list[UnknownDiscriminant]
) -> None:
    if not isinstance(component, Mapping):
        return

    if depth > max_depth:
        raise DepthExceeded(max_depth, path)

    discriminant = component.get('type')

    # ? a missing or mistyped type is left for validation to report
    if (
        isinstance(discriminant, int) and
        not isinstance(discriminant, bool) and
        ComponentType(discriminant).is_unknown
    ):
        unknown.append(UnknownDiscriminant(discriminant, f'{path}.type'))

    children = component.get('components')
    if isinstance(children, Sequence) and not isinstance(children, str):
        for index, child in enumerate(children):
            _scan_component(
                child, depth + 1, max_depth,
                f'{path}.components[{index}]', unknown)

    for key in ('accessory', 'component'):
        if key in component:
            _scan_component(
                component[key], depth + 1, max_depth,
                f'{path}.{key}', unknown)


def scan_components(
    document: Mapping[str, Any],
    *,
    max_depth: int | None = None,
    path: str = 'message'
) -> list[UnknownDiscriminant]:
    """Walk the component trees of a raw message document.

    Covers the message's own components and those of its referenced
    message. Returns every component discriminant with no known kind, in
    document order, and raises `DepthExceeded` at the first component
    nested deeper than `max_depth` (top level components are depth 1).
    """
    if max_depth is None:
        max_depth = env.max_component_depth

    unknown: list[UnknownDiscriminant] = []

    components = document.get('components')
    if isinstance(components, Sequence) and not isinstance(components, str):
        for index, component in enumerate(components):
            _scan_component(
                component, 1, max_depth,
                f'{path}.components[{index}]', unknown)

    referenced = document.get('referenced_message')
    if isinstance(referenced, Mapping):
        unknown.extend(scan_components(
            referenced,
            max_depth=max_depth,
            path=f'{path}.referenced_message'
        ))

    return unknown


def _scan(
    model: type[RawBaseModel],
    document: Mapping[str, Any],
    max_depth: int | None,
    root: str
) -> list[UnknownDiscriminant]:
    if issubclass(model, Message):
        return scan_components(document, max_depth=max_depth, path=root)

    # ? a component document is itself the top level component
    unknown: list[UnknownDiscriminant] = []
    _scan_component(
        document,
        1,
        env.max_component_depth if max_depth is None else max_depth,
        root,
        unknown
    )

    return unknown


def _fail(model: type[RawBaseModel], error: DecodeError) -> DecodeError:
    logfire.warn(
        'failed to decode {model} at {path}: {detail}',
        model=model.__name__,
        path=error.path,
        detail=error.detail
    )

    return error


def decode[M: RawBaseModel](
    document: Any,  # noqa: ANN401
    mode: DecodeMode | str | None = None,
    *,
    model: type[M] = Message,  # type: ignore[assignment]
    max_depth: int | None = None
) -> M:
    """Validate a wire document into `model`, a `Message` by default.

    `mode` defaults to the configured decode mode. Lenient decoding
    tolerates unknown enum values and component kinds, strict decoding
    raises `SchemaError` for the first one found. Every failure is a
    `DecodeError` carrying the path of the offending value.
    """
    mode = env.decode_mode if mode is None else DecodeMode(mode)
    root = _root_name(model)

    with logfire.span(
        'decode {model}',
        model=model.__name__,
        mode=mode.value
    ):
        if (
            issubclass(model, (Message, MessageComponent, UnknownComponent)) and
            isinstance(document, Mapping)
        ):
            try:
                unknown = _scan(model, document, max_depth, root)
            except DepthExceeded as e:
                raise _fail(model, e) from None

            if unknown and mode == DecodeMode.STRICT:
                raise _fail(
                    model,
                    SchemaError(unknown[0].discriminant, unknown[0].path)
                )

            for discriminant, path in unknown:
                logfire.debug(
                    'unknown component type {discriminant} at {path}',
                    discriminant=discriminant,
                    path=path
                )

        try:
            return model.model_validate(document, context={'mode': mode})
        except ValidationError as e:
            error = from_validation_error(e, document, root)

        raise _fail(model, error)


def encode(value: RawBaseModel | BuilderModel) -> dict[str, Any]:
    """Lower a model or builder to a wire document.

    Absent fields are omitted, explicit nulls and empty collections are
    kept.
    """
    return value.as_payload()


def decode_json[M: RawBaseModel](
    data: bytes | str,
    mode: DecodeMode | str | None = None,
    *,
    model: type[M] = Message,  # type: ignore[assignment]
    max_depth: int | None = None
) -> M:
    try:
        document = loads(data)
    except JSONDecodeError as e:
        raise _fail(
            model,
            TypeMismatch('json document', e.msg, _root_name(model))
        ) from None

    return decode(document, mode, model=model, max_depth=max_depth)


def encode_json(value: RawBaseModel | BuilderModel) -> bytes:
    return dumps(encode(value))
