"""Tests for logo resolution."""
import base64

from shieldsvg.logos import (
    DATA_URI_PREFIX,
    default_logo_color,
    encode_svg,
    recolor_svg,
    resolve_logo,
    simpleicons_lookup,
)

ICON = '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg"><path d="M0 0h24v24H0z"/></svg>'


def _decode(uri: str) -> str:
    assert uri.startswith(DATA_URI_PREFIX)
    return base64.b64decode(uri[len(DATA_URI_PREFIX):]).decode("utf-8")


class TestRecolorAndEncode:
    def test_recolor_sets_fill_on_root(self):
        assert recolor_svg(ICON, "#fff").startswith('<svg fill="#fff" role="img"')

    def test_recolor_only_touches_first_svg(self):
        nested = "<svg><svg></svg></svg>"
        assert recolor_svg(nested, "red") == '<svg fill="red"><svg></svg></svg>'

    def test_encode_round_trip(self):
        assert _decode(encode_svg(ICON)) == ICON


class TestResolveLogo:
    def test_absent_or_empty(self):
        assert resolve_logo(None, "red") is None
        assert resolve_logo("", "red") is None
        assert resolve_logo("   ", "red") is None

    def test_named_icon_uses_lookup(self):
        seen = []

        def lookup(name):
            seen.append(name)
            return ICON

        uri = resolve_logo("rust", "#007ec6", lookup=lookup)
        assert seen == ["rust"]
        assert _decode(uri).startswith('<svg fill="#007ec6"')

    def test_unknown_icon_is_none(self):
        assert resolve_logo("no-such-icon", "red", lookup=lambda name: None) is None

    def test_inline_svg_skips_lookup(self):
        def lookup(name):
            raise AssertionError("lookup should not be called")

        uri = resolve_logo(ICON, "whitesmoke", lookup=lookup)
        assert 'fill="whitesmoke"' in _decode(uri)

    def test_data_uri_used_verbatim(self):
        uri = "data:image/png;base64,iVBORw0KGgo="
        assert resolve_logo(uri, "red", lookup=lambda name: None) == uri


class TestDefaults:
    def test_default_logo_color(self):
        assert default_logo_color(social=True) == "#000000"
        assert default_logo_color(social=False) == "whitesmoke"


class TestSimpleIcons:
    def test_known_icon(self):
        svg = simpleicons_lookup("Python")
        assert svg is not None
        assert svg.startswith("<svg")

    def test_unknown_icon(self):
        assert simpleicons_lookup("definitely-not-an-icon-name") is None
