from __future__ import annotations

from datetime import datetime, UTC

import pytest
from pydantic import BaseModel, ValidationError

from missive import MISSING, is_not_missing
from missive.types import Color, Locale, Snowflake


class _Holder(BaseModel):
    id: Snowflake
    color: Color | None = None
    locale: Locale | None = None


def test_snowflake_from_string_and_int():
    assert _Holder(id='175928847299117063').id == 175928847299117063
    assert _Holder(id=175928847299117063).id == 175928847299117063


def test_snowflake_created_at():
    assert Snowflake(175928847299117063).created_at == datetime(
        2016, 4, 30, 11, 18, 25, 796000, tzinfo=UTC)


def test_snowflake_json_is_a_string():
    assert _Holder(id=1).model_dump(mode='json')['id'] == '1'


@pytest.mark.parametrize(
    'value',
    ['abc', '１２３', '١٢٣', -1, 1 << 64, True, 1.5, None]
)
def test_invalid_snowflakes(value):
    with pytest.raises(ValidationError) as e:
        _Holder(id=value)

    assert e.value.errors()[0]['type'] == 'type_mismatch'


def test_color_channels():
    color = Color(0x5865f2)

    assert (color.r, color.g, color.b) == (0x58, 0x65, 0xf2)
    assert color.hex == '#5865f2'
    assert Color.from_hex('#5865f2') == color


def test_color_range():
    with pytest.raises(ValidationError):
        _Holder(id=1, color=0x1000000)


def test_locale_is_open():
    assert _Holder(id=1, locale='en-US').locale is Locale.ENGLISH_US
    assert _Holder(id=1, locale='tok').locale.is_unknown


def test_missing_sentinel():
    assert not MISSING
    assert repr(MISSING) == 'MISSING'
    assert not is_not_missing(MISSING)
    assert is_not_missing(None)
    assert is_not_missing(0)
