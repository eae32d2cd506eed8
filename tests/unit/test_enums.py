from __future__ import annotations

import pytest

from missive import DecodeMode, decode, encode
from missive.enums import (
    PSEUDO_MEMBER_CACHE_SIZE,
    AttachmentFlag,
    MentionType,
    MessageFlag,
    MessageType,
    ReactionType,
    StickerFormatType,
    UserFlag,
    _pseudo_member
)
from missive.models import Reaction


def test_known_members_are_not_unknown():
    assert not ReactionType.BURST.is_unknown
    assert ReactionType(1) is ReactionType.BURST


def test_unknown_values_become_pseudo_members():
    unknown = ReactionType(7)

    assert unknown.is_unknown
    assert unknown.name == 'UNKNOWN_7'
    assert unknown.value == 7
    assert unknown == 7
    assert ReactionType(7) == unknown


def test_unknown_string_values():
    unknown = MentionType('channels')

    assert unknown.is_unknown
    assert unknown == 'channels'
    assert MentionType('channels') == unknown


def test_unknown_values_do_not_grow_the_enum(make_message):
    known = dict(MessageType._value2member_map_)

    for raw in range(1000, 6000):
        assert MessageType(raw).is_unknown

    for raw in (7000, 7001, 7002):
        message = decode(make_message(type=raw), DecodeMode.LENIENT)
        assert message.type == raw

    assert MessageType._value2member_map_ == known
    assert 'UNKNOWN_1000' not in MessageType.__members__
    assert _pseudo_member.cache_info().currsize <= PSEUDO_MEMBER_CACHE_SIZE


def test_wrong_scalar_type_is_not_a_member():
    with pytest.raises(ValueError):
        ReactionType('burst')


def test_ordering_follows_raw_values():
    assert MessageType.DEFAULT < MessageType.REPLY < MessageType(300)


def test_unknown_reaction_type_round_trips():
    document = {
        'count': 1,
        'me': False,
        'emoji': {'id': None, 'name': '⭐'},
        'type': 7
    }

    reaction = decode(document, DecodeMode.LENIENT, model=Reaction)

    assert reaction.type == ReactionType(7)
    assert reaction.type.is_unknown
    assert encode(reaction) == document


def test_message_type_deletable():
    assert MessageType.DEFAULT.deletable
    assert MessageType.REPLY.deletable
    assert not MessageType.CALL.deletable
    assert not MessageType(1000).deletable


def test_sticker_format_file_extension():
    assert StickerFormatType.PNG.file_extension == 'png'
    assert StickerFormatType.APNG.file_extension == 'png'
    assert StickerFormatType.LOTTIE.file_extension == 'json'
    assert StickerFormatType.GIF.file_extension == 'gif'

    with pytest.raises(ValueError):
        StickerFormatType(9).file_extension  # noqa: B018


def test_flags_keep_unknown_bits():
    flags = MessageFlag(0x8001)

    assert MessageFlag.CROSSPOSTED in flags
    assert MessageFlag.IS_CROSSPOST not in flags
    assert flags.unknown_bits == 0x8000
    assert int(flags) == 0x8001
    assert int(flags | MessageFlag.EPHEMERAL) == 0x8041


def test_flag_all():
    assert AttachmentFlag.all() == AttachmentFlag.IS_REMIX
    assert UserFlag.all().unknown_bits == 0
    assert MessageFlag.all() & MessageFlag.IS_VOICE_MESSAGE


def test_negative_flags_are_rejected(make_message):
    from missive import TypeMismatch

    with pytest.raises(TypeMismatch) as e:
        decode(make_message(flags=-1), DecodeMode.LENIENT)

    assert e.value.path == 'message.flags'
