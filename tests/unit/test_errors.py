from __future__ import annotations

import pytest

from missive import (
    DecodeError,
    DecodeMode,
    MissingRequiredField,
    SchemaError,
    TypeMismatch,
    decode
)
from missive.errors import BaseMissiveException, wire_type_name


def _embeds_with_bad_field_value() -> list[dict]:
    return [
        {'title': 'zero'},
        {'title': 'one'},
        {
            'title': 'two',
            'fields': [{'name': 'count', 'value': 3}]
        }
    ]


@pytest.mark.parametrize('field', ['id', 'channel_id', 'author', 'timestamp', 'type'])
def test_required_fields(make_message, field):
    document = make_message()
    del document[field]

    with pytest.raises(MissingRequiredField) as e:
        decode(document, DecodeMode.LENIENT)

    assert e.value.name == field
    assert e.value.path == f'message.{field}'


def test_nested_missing_field(make_message):
    document = make_message()
    del document['author']['username']

    with pytest.raises(MissingRequiredField) as e:
        decode(document, DecodeMode.LENIENT)

    assert e.value.path == 'message.author.username'


def test_type_mismatch_path(make_message):
    with pytest.raises(TypeMismatch) as e:
        decode(
            make_message(embeds=_embeds_with_bad_field_value()),
            DecodeMode.LENIENT
        )

    assert e.value.path == 'message.embeds[2].fields[0].value'
    assert e.value.expected == 'string'
    assert e.value.found == 'integer'
    assert str(e.value) == (
        'expected string, found integer at message.embeds[2].fields[0].value')


def test_wrongly_typed_discriminant(make_message):
    with pytest.raises(TypeMismatch) as e:
        decode(make_message(type='default'), DecodeMode.LENIENT)

    assert e.value.path == 'message.type'
    assert e.value.found == 'string'


def test_bad_snowflake(make_message):
    with pytest.raises(TypeMismatch) as e:
        decode(make_message(channel_id='general'), DecodeMode.LENIENT)

    assert e.value.expected == 'snowflake'
    assert e.value.path == 'message.channel_id'


def test_edited_before_created(make_message):
    with pytest.raises(TypeMismatch) as e:
        decode(
            make_message(edited_timestamp='2024-01-07T18:00:00+00:00'),
            DecodeMode.LENIENT
        )

    assert e.value.path == 'message.edited_timestamp'


def test_naive_timestamps_are_rejected(make_message):
    with pytest.raises(TypeMismatch) as e:
        decode(
            make_message(timestamp='2024-01-07T18:30:00'),
            DecodeMode.LENIENT
        )

    assert e.value.path == 'message.timestamp'


def test_non_object_document():
    with pytest.raises(TypeMismatch) as e:
        decode(['not', 'a', 'message'], DecodeMode.LENIENT)

    assert e.value.expected == 'object'
    assert e.value.found == 'array'
    assert e.value.path == 'message'


def test_unknown_enum_fails_when_strict(make_message):
    with pytest.raises(SchemaError) as e:
        decode(
            make_message(reactions=[
                {
                    'count': 1,
                    'me': False,
                    'emoji': {'id': None, 'name': '⭐'},
                    'type': 9
                }
            ]),
            DecodeMode.STRICT
        )

    assert e.value.discriminant == 9
    assert e.value.path == 'message.reactions[0].type'


def test_unknown_flags_never_fail_when_strict(make_message):
    message = decode(
        make_message(author={
            'id': '1',
            'username': 'x',
            'discriminator': '0',
            'public_flags': 1 << 40
        }),
        DecodeMode.STRICT
    )

    assert message.author.public_flags.unknown_bits == 1 << 40


def test_taxonomy():
    for error in (MissingRequiredField, TypeMismatch, SchemaError):
        assert issubclass(error, DecodeError)
        assert issubclass(error, BaseMissiveException)
        assert not issubclass(error, ValueError)


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        (None, 'null'),
        (True, 'boolean'),
        (1, 'integer'),
        (1.5, 'number'),
        ('a', 'string'),
        ({}, 'object'),
        ([], 'array'),
    ]
)
def test_wire_type_name(value, expected):
    assert wire_type_name(value) == expected
