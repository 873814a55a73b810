"""Badge geometry for the five supported styles.

All functions here are pure: they take already-measured text widths and
resolved colors and return a frozen layout dataclass that the template
renderer turns into SVG. Text coordinates are scaled by ``FONT_SCALE``
because the templates draw text at ``scale(.1)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shieldsvg.colors import (
    DEFAULT_LABEL_COLOR,
    DEFAULT_MESSAGE_COLOR,
    contrast_pair,
    css_to_hex,
)
from shieldsvg.measurer import Font

BADGE_HEIGHT = 20
PLASTIC_HEIGHT = 18
FOR_THE_BADGE_HEIGHT = 28
HORIZONTAL_PADDING = 5
FONT_SCALE = 10

LOGO_WIDTH = 14
LOGO_PADDING = 3
# Applied when there is no label at all but a logo is shown.
LABEL_LESS_LOGO_OFFSET = -3

SOCIAL_INTERNAL_HEIGHT = 19
SOCIAL_LABEL_PADDING = 5
SOCIAL_MESSAGE_PADDING = 4
SOCIAL_GUTTER = 6

FTB_LETTER_SPACING = 1.25
FTB_LOGO_TEXT_GUTTER = 6
FTB_LOGO_MARGIN = 9
FTB_TEXT_MARGIN = 12


class BadgeStyle(str, Enum):
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"
    SOCIAL = "social"
    FOR_THE_BADGE = "for-the-badge"

    @classmethod
    def parse(cls, value: str | BadgeStyle | None) -> BadgeStyle:
        """Parse a style name (kebab- or snake-case, any case); None means flat."""
        if value is None:
            return cls.FLAT
        if isinstance(value, cls):
            return value
        key = value.strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown badge style {value!r}. Must be one of: {valid}") from None

    @property
    def label_font(self) -> Font:
        if self is BadgeStyle.SOCIAL:
            return Font.HELVETICA_BOLD_11
        if self is BadgeStyle.FOR_THE_BADGE:
            return Font.VERDANA_10
        return Font.VERDANA_11

    @property
    def message_font(self) -> Font:
        if self is BadgeStyle.SOCIAL:
            return Font.HELVETICA_BOLD_11
        if self is BadgeStyle.FOR_THE_BADGE:
            return Font.VERDANA_BOLD_10
        return Font.VERDANA_11


@dataclass(frozen=True)
class LinkRegions:
    """Where clicks go.

    A lone ``link`` wraps the whole badge. Once ``extra_link`` is set the badge
    is split: the left region follows ``link`` and the right one ``extra_link``.
    """

    whole: str | None = None
    left: str | None = None
    right: str | None = None

    @property
    def split(self) -> bool:
        return bool(self.left or self.right)


def link_regions(link: str | None, extra_link: str | None) -> LinkRegions:
    link = link or ""
    extra_link = extra_link or ""
    if link and not extra_link:
        return LinkRegions(whole=link)
    return LinkRegions(left=link or None, right=extra_link or None)


@dataclass(frozen=True)
class LayoutInputs:
    """Resolved, style-transformed inputs for a layout function.

    ``label`` keeps the None / "" distinction: None means no label was given,
    "" means an explicitly empty one. ``extra_link`` keeps it too.
    """

    label: str | None
    message: str
    accessible_text: str
    label_color: str = DEFAULT_LABEL_COLOR
    message_color: str = DEFAULT_MESSAGE_COLOR
    has_label_color: bool = False
    logo: str = ""
    link: str | None = None
    extra_link: str | None = None


@dataclass(frozen=True)
class FlatLayout:
    """Geometry shared by flat, flat-square and plastic."""

    style: BadgeStyle
    total_width: int
    height: int
    left_width: int
    right_width: int
    label: str
    label_x: float
    label_width_scaled: int
    message: str
    message_x: float
    message_width_scaled: int
    label_color: str
    message_color: str
    label_text_color: str
    label_shadow_color: str
    message_text_color: str
    message_shadow_color: str
    logo: str
    logo_x: int
    message_link_x: int
    accessible_text: str
    links: LinkRegions = field(default_factory=LinkRegions)


@dataclass(frozen=True)
class SocialLayout:
    style: BadgeStyle
    total_width: int
    height: int
    internal_height: int
    left_width: int
    right_width: int
    label: str
    label_rect_width: int
    label_text_x: float
    label_text_length: int
    message: str
    message_rect_width: int
    message_bubble_main_x: float
    message_bubble_notch_x: int
    message_text_x: float
    message_text_length: int
    logo: str
    logo_x: int
    accessible_text: str
    links: LinkRegions = field(default_factory=LinkRegions)


@dataclass(frozen=True)
class ForTheBadgeLayout:
    style: BadgeStyle
    total_width: int
    height: int
    left_width: int
    right_width: int
    label: str
    label_x: float
    label_width_scaled: int
    message: str
    message_x: float
    message_width_scaled: int
    label_color: str
    message_color: str
    label_text_color: str
    message_text_color: str
    logo: str
    logo_x: int
    accessible_text: str
    links: LinkRegions = field(default_factory=LinkRegions)


LayoutResult = FlatLayout | SocialLayout | ForTheBadgeLayout


def accessible_text(label: str | None, message: str) -> str:
    """``label: message``, or just the message when there is no label text."""
    if label:
        return f"{label}: {message}"
    return message


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def display_texts(style: BadgeStyle, label: str | None, message: str | None) -> tuple[str | None, str, str]:
    """Apply per-style text casing; returns ``(label, message, accessible_text)``.

    Social capitalizes the label. For-the-badge upper-cases both texts, but
    its accessible text keeps the message as given.
    """
    message = message or ""
    if style is BadgeStyle.SOCIAL:
        label = capitalize(label) if label is not None else None
        return label, message, accessible_text(label, message)
    if style is BadgeStyle.FOR_THE_BADGE:
        label = (label or "").upper()
        return label, message.upper(), accessible_text(label, message)
    return label, message, accessible_text(label, message)


def has_label_region(style: BadgeStyle, label: str | None, has_label_color: bool) -> bool:
    """Whether the left-hand block is drawn.

    An explicit label color forces an (empty) block, except for plastic where
    an empty label always means no label.
    """
    if style is BadgeStyle.PLASTIC:
        return bool(label)
    return bool(label) or has_label_color


def logo_reservation(label: str | None, has_logo: bool) -> int:
    """Horizontal space held for the logo; padding collapses for an empty label."""
    if not has_logo:
        return 0
    padding = 0 if label == "" else LOGO_PADDING
    return LOGO_WIDTH + padding


def logo_offset(label: str | None, has_logo: bool) -> int:
    return LABEL_LESS_LOGO_OFFSET if label is None and has_logo else 0


def _style_height(style: BadgeStyle) -> int:
    return PLASTIC_HEIGHT if style is BadgeStyle.PLASTIC else BADGE_HEIGHT


def layout_flat(
    style: BadgeStyle,
    inputs: LayoutInputs,
    label_width: int,
    message_width: int,
) -> FlatLayout:
    """Geometry for flat, flat-square and plastic badges.

    ``label_width``/``message_width`` are odd-rounded pixel widths in Verdana
    11px (0 for an absent label).
    """
    label = inputs.label
    message = inputs.message
    has_logo = bool(inputs.logo)
    has_label = has_label_region(style, label, inputs.has_label_color)
    reserve = logo_reservation(label, has_logo)
    offset = logo_offset(label, has_logo)

    if not has_label:
        label_width = 0

    left_width = label_width + 2 * HORIZONTAL_PADDING + reserve if has_label else 0
    if has_label and label == "":
        left_width -= 1
    left_width += offset

    message_margin = left_width - (1 if message else 0)
    if not has_label:
        message_margin += reserve + HORIZONTAL_PADDING if has_logo else 1

    right_width = message_width + 2 * HORIZONTAL_PADDING
    if has_logo and not has_label:
        right_width += reserve + (HORIZONTAL_PADDING - 1 if message else 0)

    label_margin = reserve + 1
    label_x = FONT_SCALE * (label_margin + 0.5 * label_width + HORIZONTAL_PADDING) + offset
    message_x = FONT_SCALE * (message_margin + 0.5 * message_width + HORIZONTAL_PADDING)

    total_width = left_width + right_width
    if not inputs.has_label_color:
        right_width += offset

    # The right-hand hit region starts after the logo when it stands in for the label.
    extra_link = inputs.extra_link
    if has_logo and not has_label and extra_link != "":
        message_link_x = reserve + HORIZONTAL_PADDING
    else:
        message_link_x = left_width
    if not has_label and extra_link:
        message_link_x += offset

    label_text_color, label_shadow_color = contrast_pair(
        css_to_hex(inputs.label_color, DEFAULT_LABEL_COLOR)
    )
    message_text_color, message_shadow_color = contrast_pair(
        css_to_hex(inputs.message_color, DEFAULT_MESSAGE_COLOR)
    )

    return FlatLayout(
        style=style,
        total_width=total_width,
        height=_style_height(style),
        left_width=max(left_width, 0),
        right_width=right_width,
        label=label or "",
        label_x=label_x,
        label_width_scaled=label_width * FONT_SCALE,
        message=message,
        message_x=message_x,
        message_width_scaled=message_width * FONT_SCALE,
        label_color=inputs.label_color,
        message_color=inputs.message_color,
        label_text_color=label_text_color,
        label_shadow_color=label_shadow_color,
        message_text_color=message_text_color,
        message_shadow_color=message_shadow_color,
        logo=inputs.logo,
        logo_x=HORIZONTAL_PADDING + offset,
        message_link_x=max(message_link_x, 0),
        accessible_text=inputs.accessible_text,
        links=link_regions(inputs.link, inputs.extra_link),
    )


def layout_social(inputs: LayoutInputs, label_width: int, message_width: int) -> SocialLayout:
    """Geometry for the social style: a label button and a message bubble.

    Widths are odd-rounded Helvetica bold 11px widths of the capitalized label
    and the message.
    """
    has_logo = bool(inputs.logo)
    reserve = logo_reservation(inputs.label, has_logo)
    offset = logo_offset(inputs.label, has_logo)
    message = inputs.message

    label_rect_width = label_width + reserve + 2 * SOCIAL_LABEL_PADDING + offset
    message_rect_width = message_width + 2 * SOCIAL_MESSAGE_PADDING

    label_text_x = FONT_SCALE * (reserve + label_width / 2 + SOCIAL_LABEL_PADDING + offset)
    message_text_x = FONT_SCALE * (label_rect_width + SOCIAL_GUTTER + message_rect_width / 2)

    left_width = label_rect_width + 1
    right_width = SOCIAL_GUTTER + message_rect_width if message else 0

    return SocialLayout(
        style=BadgeStyle.SOCIAL,
        total_width=left_width + right_width,
        height=BADGE_HEIGHT,
        internal_height=SOCIAL_INTERNAL_HEIGHT,
        left_width=left_width,
        right_width=right_width,
        label=inputs.label or "",
        label_rect_width=label_rect_width,
        label_text_x=label_text_x,
        label_text_length=FONT_SCALE * label_width,
        message=message,
        message_rect_width=message_rect_width,
        message_bubble_main_x=label_rect_width + SOCIAL_GUTTER + 0.5,
        message_bubble_notch_x=label_rect_width + SOCIAL_GUTTER,
        message_text_x=message_text_x,
        message_text_length=FONT_SCALE * message_width,
        logo=inputs.logo,
        logo_x=HORIZONTAL_PADDING + offset,
        accessible_text=inputs.accessible_text,
        links=link_regions(inputs.link, inputs.extra_link),
    )


def layout_for_the_badge(
    inputs: LayoutInputs, label_width: int, message_width: int
) -> ForTheBadgeLayout:
    """Geometry for for-the-badge.

    Widths are truncated raw Verdana 10px widths (normal for the label, bold
    for the message) plus ``FTB_LETTER_SPACING`` per character; 0 for empty text.
    """
    label = inputs.label or ""
    message = inputs.message
    has_logo = bool(inputs.logo)
    has_label = bool(label)
    no_text = not has_label and not message
    need_label_rect = has_label or (has_logo and bool(inputs.label_color))
    gutter = FTB_LOGO_TEXT_GUTTER - FTB_LOGO_MARGIN if no_text else FTB_LOGO_TEXT_GUTTER

    if has_logo:
        logo_x = FTB_LOGO_MARGIN
        label_text_min_x = FTB_LOGO_MARGIN + LOGO_WIDTH + gutter
    else:
        logo_x = 0
        label_text_min_x = FTB_TEXT_MARGIN

    if need_label_rect:
        if has_label:
            left_width = label_text_min_x + label_width + FTB_TEXT_MARGIN
        else:
            left_width = 2 * FTB_LOGO_MARGIN + LOGO_WIDTH
        message_text_min_x = left_width + FTB_TEXT_MARGIN
        right_width = 2 * FTB_TEXT_MARGIN + message_width
    elif has_logo:
        left_width = 0
        message_text_min_x = FTB_TEXT_MARGIN + LOGO_WIDTH + gutter
        right_width = 2 * FTB_TEXT_MARGIN + LOGO_WIDTH + gutter + message_width
    else:
        left_width = 0
        message_text_min_x = FTB_TEXT_MARGIN
        right_width = 2 * FTB_TEXT_MARGIN + message_width

    label_text_color, _ = contrast_pair(css_to_hex(inputs.label_color, DEFAULT_LABEL_COLOR))
    message_text_color, _ = contrast_pair(css_to_hex(inputs.message_color, DEFAULT_MESSAGE_COLOR))

    return ForTheBadgeLayout(
        style=BadgeStyle.FOR_THE_BADGE,
        total_width=left_width + right_width,
        height=FOR_THE_BADGE_HEIGHT,
        left_width=left_width,
        right_width=right_width,
        label=label,
        label_x=FONT_SCALE * (label_text_min_x + 0.5 * label_width),
        label_width_scaled=FONT_SCALE * label_width,
        message=message,
        message_x=FONT_SCALE * (message_text_min_x + 0.5 * message_width),
        message_width_scaled=FONT_SCALE * message_width,
        label_color=inputs.label_color,
        message_color=inputs.message_color,
        label_text_color=label_text_color,
        message_text_color=message_text_color,
        logo=inputs.logo,
        logo_x=logo_x,
        accessible_text=inputs.accessible_text,
        links=link_regions(inputs.link, inputs.extra_link),
    )
