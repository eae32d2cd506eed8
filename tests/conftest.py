"""Shared wire documents."""
from __future__ import annotations

from collections.abc import Callable
from copy import deepcopy
from typing import Any

import logfire
import pytest


MESSAGE_ID = '1193042937423888394'
CHANNEL_ID = '1193042902661488650'
GUILD_ID = '1193042844654264410'
AUTHOR_ID = '250797109022818305'


def author_document(**overrides: Any) -> dict[str, Any]:
    return {
        'id': AUTHOR_ID,
        'username': 'tyrantlink',
        'discriminator': '0',
        'global_name': 'tyrant',
        'avatar': None,
        **overrides
    }


def minimal_message(**overrides: Any) -> dict[str, Any]:
    return {
        'id': MESSAGE_ID,
        'channel_id': CHANNEL_ID,
        'author': author_document(),
        'timestamp': '2024-01-07T18:30:00+00:00',
        'type': 0,
        **overrides
    }


def nested_rows(depth: int) -> dict[str, Any]:
    """An action row chain `depth` components deep, ending in a button."""
    component: dict[str, Any] = {
        'type': 2,
        'style': 1,
        'label': 'deep',
        'custom_id': 'deep'
    }

    for _ in range(depth - 1):
        component = {'type': 1, 'components': [component]}

    return component


@pytest.fixture
def make_message() -> Callable[..., dict[str, Any]]:
    return minimal_message


@pytest.fixture
def full_message() -> dict[str, Any]:
    """A reply carrying one of everything, in canonical wire form."""
    return deepcopy({
        **minimal_message(),
        'type': 19,
        'guild_id': GUILD_ID,
        'author': author_document(public_flags=64, bot=False),
        'member': {
            'nick': None,
            'roles': ['1193043011155619840'],
            'joined_at': '2023-05-01T12:00:00+00:00',
            'premium_since': None,
            'deaf': False,
            'mute': False,
            'flags': 0
        },
        'content': 'look at this <@&1193043011155619840>',
        'edited_timestamp': '2024-01-07T18:31:00+00:00',
        'tts': False,
        'mention_everyone': False,
        'mentions': [
            author_document(
                id='1193043105728024576',
                username='moderator',
                global_name=None,
                member={'nick': 'mod', 'roles': []}
            )
        ],
        'mention_roles': ['1193043011155619840'],
        'mention_channels': [
            {
                'id': CHANNEL_ID,
                'guild_id': GUILD_ID,
                'type': 0,
                'name': 'general'
            }
        ],
        'attachments': [
            {
                'id': '1193043234417303552',
                'filename': 'SPOILER_cat.png',
                'size': 1024,
                'url': 'https://cdn.discordapp.com/attachments/1/2/SPOILER_cat.png',
                'proxy_url': 'https://media.discordapp.net/attachments/1/2/SPOILER_cat.png',
                'content_type': 'image/png',
                'height': 128,
                'width': 128,
                'flags': 4
            }
        ],
        'embeds': [
            {
                'type': 'rich',
                'title': 'status',
                'description': 'all systems nominal',
                'color': 0x5865f2,
                'timestamp': '2024-01-07T18:30:00+00:00',
                'footer': {'text': 'missive'},
                'fields': [
                    {'name': 'uptime', 'value': '99.9%', 'inline': True}
                ]
            }
        ],
        'reactions': [
            {
                'count': 2,
                'count_details': {'burst': 0, 'normal': 2},
                'me': True,
                'me_burst': False,
                'burst_colors': [],
                'emoji': {'id': None, 'name': '👍'}
            },
            {
                'count': 1,
                'me': False,
                'emoji': {
                    'id': '1193043356224208896',
                    'name': 'blobwave',
                    'animated': True
                }
            }
        ],
        'nonce': '1193042937000000000',
        'pinned': False,
        'activity': {'type': 3, 'party_id': 'spotify:250797109022818305'},
        'application': {
            'id': '1193043479012335616',
            'name': 'listener',
            'description': 'plays music',
            'icon': None
        },
        'application_id': '1193043479012335616',
        'flags': 4,
        'message_reference': {
            'type': 0,
            'message_id': '1193042000000000000',
            'channel_id': CHANNEL_ID,
            'guild_id': GUILD_ID
        },
        'referenced_message': minimal_message(
            id='1193042000000000000',
            content='original'
        ),
        'interaction_metadata': {
            'id': '1193043600000000000',
            'type': 2,
            'user': author_document(),
            'authorizing_integration_owners': {'0': GUILD_ID}
        },
        'components': [
            {
                'type': 1,
                'id': 1,
                'components': [
                    {
                        'type': 2,
                        'id': 2,
                        'style': 1,
                        'label': 'acknowledge',
                        'custom_id': 'ack'
                    },
                    {
                        'type': 2,
                        'id': 3,
                        'style': 5,
                        'label': 'docs',
                        'url': 'https://discord.com/developers/docs'
                    }
                ]
            },
            {
                'type': 17,
                'id': 4,
                'accent_color': None,
                'components': [
                    {'type': 10, 'id': 5, 'content': '## heading'},
                    {
                        'type': 9,
                        'id': 6,
                        'components': [
                            {'type': 10, 'id': 7, 'content': 'beside'}
                        ],
                        'accessory': {
                            'type': 11,
                            'id': 8,
                            'media': {'url': 'https://example.com/a.png'}
                        }
                    },
                    {'type': 14, 'id': 9, 'divider': True, 'spacing': 1}
                ]
            }
        ],
        'sticker_items': [
            {'id': '1193043700000000000', 'name': 'wave', 'format_type': 1}
        ],
        'position': 0,
        'role_subscription_data': {
            'role_subscription_listing_id': '1193043800000000000',
            'tier_name': 'gold',
            'total_months_subscribed': 3,
            'is_renewal': True
        },
        'poll_preview': {'question': 'kept as is'}
    })


@pytest.fixture(autouse=True, scope='session')
def _quiet_logfire() -> None:
    logfire.configure(send_to_logfire=False, console=False)
