"""UI theme definitions and selection helpers.

Themes map layout style tags and screen chrome (status bar, divider, help
modal) to ANSI SGR sequences. The plain theme disables all styling.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..layout import SpanStyle, StyleKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    divider: str
    status: str
    header_1: str
    header_2: str
    header_3: str
    bold: str
    italic: str
    code: str
    quote: str
    rule: str
    help_heading: str
    help_key: str
    help_dim: str
    help_modal_title: str
    help_modal_border: str
    help_backdrop: str

    def style_sgr(self, style: SpanStyle) -> str:
        """Return the SGR prefix for ``style`` (empty for plain text)."""
        kind = style.kind
        if kind is StyleKind.HEADER:
            return (self.header_1, self.header_2, self.header_3)[max(1, min(3, style.level)) - 1]
        if kind is StyleKind.BOLD:
            return self.bold
        if kind is StyleKind.ITALIC:
            return self.italic
        if kind is StyleKind.CODE:
            return self.code
        if kind is StyleKind.QUOTE:
            return self.quote
        if kind is StyleKind.RULE:
            return self.rule
        return ""


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    status="\033[1;33m",
    header_1="\033[1;4;38;5;81m",
    header_2="\033[1;38;5;81m",
    header_3="\033[1;38;5;110m",
    bold="\033[1m",
    italic="\033[3m",
    code="\033[33m",
    quote="\033[2;3;38;5;250m",
    rule="\033[2;38;5;245m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    help_modal_title="\033[1;38;5;45m",
    help_modal_border="\033[38;5;45m",
    help_backdrop="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2;38;5;31m",
    status="\033[1;38;5;45m",
    header_1="\033[1;4;38;5;45m",
    header_2="\033[1;38;5;39m",
    header_3="\033[1;38;5;117m",
    bold="\033[1;38;5;153m",
    italic="\033[3;38;5;153m",
    code="\033[38;5;215m",
    quote="\033[2;3;38;5;110m",
    rule="\033[2;38;5;31m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    help_modal_title="\033[1;38;5;39m",
    help_modal_border="\033[38;5;39m",
    help_backdrop="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    divider="",
    status="",
    header_1="",
    header_2="",
    header_3="",
    bold="",
    italic="",
    code="",
    quote="",
    rule="",
    help_heading="",
    help_key="",
    help_dim="",
    help_modal_title="",
    help_modal_border="",
    help_backdrop="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
