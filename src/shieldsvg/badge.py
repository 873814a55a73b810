"""Badge pipeline: resolve colors and logo, measure text, lay out, render.

>>> svg = render_badge_svg(BadgeSpec(label="build", message="passing", message_color="brightgreen"))
>>> svg = Badge.style(BadgeStyle.PLASTIC).label("version").message("1.0.0").build()
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from shieldsvg import templates
from shieldsvg.colors import (
    DEFAULT_MESSAGE_COLOR,
    ColorResolver,
    default_label_color,
    default_message_color,
    default_resolver,
)
from shieldsvg.layout import (
    FTB_LETTER_SPACING,
    BadgeStyle,
    LayoutInputs,
    LayoutResult,
    display_texts,
    layout_flat,
    layout_for_the_badge,
    layout_social,
)
from shieldsvg.log import get_logger
from shieldsvg.logos import IconLookup, default_logo_color, resolve_logo, simpleicons_lookup
from shieldsvg.measurer import TextMeasurer, default_measurer

logger = get_logger("badge")

_FLAT_FAMILY = (BadgeStyle.FLAT, BadgeStyle.FLAT_SQUARE, BadgeStyle.PLASTIC)


@dataclass(frozen=True)
class BadgeSpec:
    """Everything needed to draw one badge. Only ``style`` is required."""

    style: BadgeStyle = BadgeStyle.FLAT
    label: str | None = None
    message: str | None = None
    label_color: str | None = None
    message_color: str | None = None
    link: str | None = None
    extra_link: str | None = None
    logo: str | None = None
    logo_color: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", BadgeStyle.parse(self.style))

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: dict) -> BadgeSpec:
        """Build a spec from a JSON-style mapping.

        Keys may be snake_case or kebab-case (``label-color``). ``style``
        accepts any name :meth:`BadgeStyle.parse` understands.
        """
        if not isinstance(data, dict):
            raise ValueError(f"badge spec must be an object, got {type(data).__name__}")
        known = set(cls.field_names())
        kwargs: dict = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ValueError(f"Unknown badge field {raw_key!r}")
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Badge field {raw_key!r} must be a string, got {value!r}")
            kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["style"] = self.style.value
        return {k: v for k, v in data.items() if v is not None}


class BadgeRenderer:
    """Wires measurer, color resolver and icon lookup into one render call.

    Every collaborator is injectable; the defaults share the module-level
    caches.
    """

    def __init__(
        self,
        measurer: TextMeasurer | None = None,
        colors: ColorResolver | None = None,
        icon_lookup: IconLookup = simpleicons_lookup,
    ) -> None:
        self.measurer = measurer if measurer is not None else default_measurer
        self.colors = colors if colors is not None else default_resolver
        self.icon_lookup = icon_lookup

    def resolve_inputs(self, spec: BadgeSpec) -> LayoutInputs:
        style = spec.style
        fallback_logo_color = default_logo_color(style is BadgeStyle.SOCIAL)
        logo_color = self.colors.resolve(spec.logo_color or fallback_logo_color, fallback_logo_color)
        message_color = self.colors.resolve(
            spec.message_color or DEFAULT_MESSAGE_COLOR, DEFAULT_MESSAGE_COLOR
        )
        logo = resolve_logo(spec.logo, logo_color, lookup=self.icon_lookup) or ""

        # A badge without any label borrows the message color, unless a logo
        # needs the default grey behind it.
        if not spec.label and not spec.label_color:
            label_token = default_label_color() if logo else message_color
        else:
            label_token = spec.label_color or default_label_color()
        label_color = self.colors.resolve(label_token, default_label_color())

        label, message, accessible = display_texts(style, spec.label, spec.message)
        return LayoutInputs(
            label=label,
            message=message,
            accessible_text=accessible,
            label_color=label_color,
            message_color=message_color,
            has_label_color=bool(spec.label_color),
            logo=logo,
            link=spec.link,
            extra_link=spec.extra_link,
        )

    def layout(self, spec: BadgeSpec) -> LayoutResult:
        inputs = self.resolve_inputs(spec)
        style = spec.style
        if style in _FLAT_FAMILY:
            font = style.label_font
            label_width = (
                self.measurer.preferred_width(inputs.label, font) if inputs.label is not None else 0
            )
            message_width = self.measurer.preferred_width(inputs.message, style.message_font)
            return layout_flat(style, inputs, label_width, message_width)
        if style is BadgeStyle.SOCIAL:
            label_width = self.measurer.preferred_width(inputs.label or "", style.label_font)
            message_width = self.measurer.preferred_width(inputs.message, style.message_font)
            return layout_social(inputs, label_width, message_width)
        label_width = self.measurer.spaced_width(inputs.label or "", style.label_font, FTB_LETTER_SPACING)
        message_width = self.measurer.spaced_width(inputs.message, style.message_font, FTB_LETTER_SPACING)
        return layout_for_the_badge(inputs, label_width, message_width)

    def render(self, spec: BadgeSpec) -> str:
        layout = self.layout(spec)
        logger.debug(
            "Rendering %s badge %r (%dx%d)",
            layout.style.value, layout.accessible_text, layout.total_width, layout.height,
        )
        return templates.render(layout)


default_renderer = BadgeRenderer()


def render_badge_svg(spec: BadgeSpec) -> str:
    """Render ``spec`` to a self-contained SVG document."""
    return default_renderer.render(spec)


class BadgeBuilder:
    """Fluent badge construction; every setter returns the builder."""

    def __init__(self, style: BadgeStyle = BadgeStyle.FLAT) -> None:
        self._spec = BadgeSpec(style=style)

    def _set(self, **changes) -> BadgeBuilder:
        self._spec = replace(self._spec, **changes)
        return self

    def label(self, value: str) -> BadgeBuilder:
        return self._set(label=value)

    def message(self, value: str) -> BadgeBuilder:
        return self._set(message=value)

    def label_color(self, value: str) -> BadgeBuilder:
        return self._set(label_color=value)

    def message_color(self, value: str) -> BadgeBuilder:
        return self._set(message_color=value)

    def logo(self, value: str) -> BadgeBuilder:
        return self._set(logo=value)

    def logo_color(self, value: str) -> BadgeBuilder:
        return self._set(logo_color=value)

    def link(self, value: str) -> BadgeBuilder:
        return self._set(link=value)

    def extra_link(self, value: str) -> BadgeBuilder:
        return self._set(extra_link=value)

    def spec(self) -> BadgeSpec:
        """The spec :meth:`build` renders.

        Non-social styles get explicit default colors; social drops the label
        color and blanks the message color since it draws neither.
        """
        if self._spec.style is BadgeStyle.SOCIAL:
            return replace(self._spec, label_color=None, message_color="")
        label_color = self._spec.label_color
        message_color = self._spec.message_color
        return replace(
            self._spec,
            label_color=default_label_color() if label_color is None else label_color,
            message_color=default_message_color() if message_color is None else message_color,
        )

    def build(self, renderer: BadgeRenderer | None = None) -> str:
        return (renderer or default_renderer).render(self.spec())


class Badge:
    """Entry point for the fluent API: ``Badge.style(BadgeStyle.FLAT)...``."""

    @staticmethod
    def style(style: BadgeStyle | str) -> BadgeBuilder:
        return BadgeBuilder(style)
