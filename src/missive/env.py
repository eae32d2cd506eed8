from typing import Self
from os import environ

from pydantic import BaseModel, Field

from .enums import DecodeMode


__all__ = (
    'Env',
    'env',
)


class Env(BaseModel):
    decode_mode: DecodeMode
    max_component_depth: int = Field(ge=1)
    dev: bool
    logfire_token: str

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'decode_mode': environ.get('MISSIVE_DECODE_MODE', 'lenient').lower(),
            'max_component_depth': int(
                environ.get('MISSIVE_MAX_COMPONENT_DEPTH', '8')),
            'dev': environ.get('MISSIVE_DEV', '1') != '0',
            'logfire_token': environ.get('LOGFIRE_TOKEN', '')
        })


env = Env.new()
