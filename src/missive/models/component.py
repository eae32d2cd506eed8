from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Annotated, Any

from pydantic import Discriminator, StrictInt, Tag, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from missive.missing import MISSING, MissingOr, MissingNoneOr, is_not_missing
from missive.types import Snowflake, Color
from missive.enums import (
    SelectDefaultValueType,
    TextInputStyle,
    ComponentType,
    ButtonStyle,
    ChannelType,
    is_strict
)

from .base import RawBaseModel


__all__ = (
    'ActionRow',
    'Button',
    'Component',
    'ComponentEmoji',
    'Container',
    'MessageComponent',
    'Section',
    'SelectMenu',
    'Separator',
    'TextDisplay',
    'TextInput',
    'Thumbnail',
    'UnfurledMediaItem',
    'UnknownComponent',
    'walk_components',
)


class ComponentEmoji(RawBaseModel):
    id: MissingNoneOr[Snowflake] = MISSING
    name: MissingNoneOr[str] = MISSING
    animated: MissingOr[bool] = MISSING


class UnfurledMediaItem(RawBaseModel):
    url: str
    proxy_url: MissingOr[str] = MISSING
    height: MissingNoneOr[int] = MISSING
    width: MissingNoneOr[int] = MISSING
    content_type: MissingOr[str] = MISSING


class MessageComponent(RawBaseModel):
    type: ComponentType
    id: MissingOr[int] = MISSING
    """optional identifier, unique within the message"""


class Button(MessageComponent):
    type: ComponentType = ComponentType.BUTTON
    """`2` for a button"""
    style: ButtonStyle
    """A button style"""
    label: MissingOr[str] = MISSING
    """Text that appears on the button; max 80 characters"""
    emoji: MissingOr[ComponentEmoji] = MISSING
    """`name`, `id`, and `animated`"""
    custom_id: MissingOr[str] = MISSING
    """Developer-defined identifier for the button; max 100 characters"""
    sku_id: MissingOr[Snowflake] = MISSING
    """Identifier for a purchasable SKU, only available when using premium-style buttons"""
    url: MissingOr[str] = MISSING
    """URL for link-style buttons"""
    disabled: MissingOr[bool] = MISSING
    """Whether the button is disabled (defaults to `false`)"""

    def with_overrides(
        self,
        style: MissingOr[ButtonStyle] = MISSING,
        label: MissingOr[str] = MISSING,
        emoji: MissingOr[ComponentEmoji] = MISSING,
        url: MissingOr[str] = MISSING,
        disabled: MissingOr[bool] = MISSING
    ) -> Button:
        return self.model_copy(
            update={
                k: v
                for k, v in {
                    'style': style,
                    'label': label,
                    'emoji': emoji,
                    'url': url,
                    'disabled': disabled
                }.items()
                if is_not_missing(v)},
            deep=True
        )


class SelectMenu(MessageComponent):
    class Option(RawBaseModel):
        label: str
        """User-facing name of the option; max 100 characters"""
        value: str
        """Dev-defined value of the option; max 100 characters"""
        description: MissingOr[str] = MISSING
        """Additional description of the option; max 100 characters"""
        emoji: MissingOr[ComponentEmoji] = MISSING
        """`id`, `name`, and `animated`"""
        default: MissingOr[bool] = MISSING
        """Will show this option as selected by default"""

    class DefaultValue(RawBaseModel):
        id: Snowflake
        """ID of a user, role, or channel"""
        type: SelectDefaultValueType
        """Type of value that id represents. Either "user", "role", or "channel" """

    type: ComponentType
    """Type of select menu component (text: `3`, user: `5`, role: `6`, mentionable: `7`, channels: `8`)"""
    custom_id: str
    """ID for the select menu; max 100 characters"""
    options: MissingOr[list[Option]] = MISSING
    """Specified choices in a select menu (only required and available for string selects (type `3`); max 25"""
    channel_types: MissingOr[list[ChannelType]] = MISSING
    """List of channel types to include in the channel select component (type `8`)"""
    placeholder: MissingOr[str] = MISSING
    """Placeholder text if nothing is selected; max 150 characters"""
    default_values: MissingOr[list[DefaultValue]] = MISSING
    """List of default values for auto-populated select menu components"""
    min_values: MissingOr[int] = MISSING
    """Minimum number of items that must be chosen (defaults to 1); min 0, max 25"""
    max_values: MissingOr[int] = MISSING
    """Maximum number of items that can be chosen (defaults to 1); max 25"""
    disabled: MissingOr[bool] = MISSING
    """Whether select menu is disabled (defaults to `false`)"""


class TextInput(MessageComponent):
    type: ComponentType = ComponentType.TEXT_INPUT
    """`4` for a text input"""
    custom_id: str
    """Developer-defined identifier for the input; max 100 characters"""
    style: MissingOr[TextInputStyle] = MISSING
    """The Text Input Style"""
    label: MissingOr[str] = MISSING
    """Label for this component; max 45 characters"""
    min_length: MissingOr[int] = MISSING
    """Minimum input length for a text input; min 0, max 4000"""
    max_length: MissingOr[int] = MISSING
    """Maximum input length for a text input; min 1, max 4000"""
    required: MissingOr[bool] = MISSING
    """Whether this component is required to be filled (defaults to true)"""
    value: MissingOr[str] = MISSING
    """Pre-filled value for this component; max 4000 characters"""
    placeholder: MissingOr[str] = MISSING
    """Custom placeholder text if the input is empty; max 100 characters"""


class TextDisplay(MessageComponent):
    type: ComponentType = ComponentType.TEXT_DISPLAY
    content: str
    """Markdown text"""


class Thumbnail(MessageComponent):
    type: ComponentType = ComponentType.THUMBNAIL
    media: UnfurledMediaItem
    description: MissingNoneOr[str] = MISSING
    spoiler: MissingOr[bool] = MISSING


class Separator(MessageComponent):
    type: ComponentType = ComponentType.SEPARATOR
    divider: MissingOr[bool] = MISSING
    spacing: MissingOr[int] = MISSING
    """`1` for small padding, `2` for large padding"""


class ActionRow(MessageComponent):
    type: ComponentType = ComponentType.ACTION_ROW
    components: list[Component]


class Section(MessageComponent):
    type: ComponentType = ComponentType.SECTION
    components: list[Component]
    """One to three text displays"""
    accessory: Component
    """A thumbnail or a button"""


class Container(MessageComponent):
    type: ComponentType = ComponentType.CONTAINER
    components: list[Component]
    accent_color: MissingNoneOr[Color] = MISSING
    spoiler: MissingOr[bool] = MISSING


class UnknownComponent(RawBaseModel):
    """A component kind this library has no model for.

    Everything besides `type` is kept as extra fields and re-encoded
    untouched.
    """

    type: StrictInt

    @field_validator('type')
    @classmethod
    def _reject_in_strict(cls, value: int, info: ValidationInfo) -> int:
        if is_strict(info):
            raise PydanticCustomError(
                'schema_error',
                'unrecognized component discriminant {discriminant}',
                {'discriminant': value}
            )

        return value


_COMPONENT_TAGS = {
    ComponentType.ACTION_ROW: 'action_row',
    ComponentType.BUTTON: 'button',
    ComponentType.STRING_SELECT: 'select_menu',
    ComponentType.TEXT_INPUT: 'text_input',
    ComponentType.USER_SELECT: 'select_menu',
    ComponentType.ROLE_SELECT: 'select_menu',
    ComponentType.MENTIONABLE_SELECT: 'select_menu',
    ComponentType.CHANNEL_SELECT: 'select_menu',
    ComponentType.SECTION: 'section',
    ComponentType.TEXT_DISPLAY: 'text_display',
    ComponentType.THUMBNAIL: 'thumbnail',
    ComponentType.SEPARATOR: 'separator',
    ComponentType.CONTAINER: 'container',
}


def _component_tag(value: Any) -> str | None:  # noqa: ANN401
    match value:
        case UnknownComponent():
            return 'unknown'
        case MessageComponent():
            raw = value.type
        case Mapping():
            if 'type' not in value:
                return None

            raw = value['type']
        case _:
            return 'unknown'

    if isinstance(raw, bool) or not isinstance(raw, int):
        return 'unknown'

    return _COMPONENT_TAGS.get(raw, 'unknown')


Component = Annotated[
    Annotated[ActionRow, Tag('action_row')] |
    Annotated[Button, Tag('button')] |
    Annotated[SelectMenu, Tag('select_menu')] |
    Annotated[TextInput, Tag('text_input')] |
    Annotated[Section, Tag('section')] |
    Annotated[TextDisplay, Tag('text_display')] |
    Annotated[Thumbnail, Tag('thumbnail')] |
    Annotated[Separator, Tag('separator')] |
    Annotated[Container, Tag('container')] |
    Annotated[UnknownComponent, Tag('unknown')],
    Discriminator(_component_tag)
]


def walk_components(
    components: Sequence[MessageComponent | UnknownComponent]
) -> Iterator[MessageComponent | UnknownComponent]:
    """Every component in the tree, depth first, parents before children."""
    for component in components:
        yield component

        match component:
            case ActionRow() | Container():
                yield from walk_components(component.components)
            case Section():
                yield from walk_components(component.components)
                yield from walk_components([component.accessory])


ActionRow.model_rebuild()
Section.model_rebuild()
Container.model_rebuild()
