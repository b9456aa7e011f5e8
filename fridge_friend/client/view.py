from __future__ import annotations

from dataclasses import dataclass, field

from fridge_friend.client.session import RecipeSession


INPUT_PLACEHOLDER = "Type ingredients (comma-separated)..."
VOICE_UNSUPPORTED = "Voice input not supported in this browser"
VOICE_HINT = 'Say ingredients separated by commas or "and"'


@dataclass(frozen=True)
class Chip:
    label: str
    remove_label: str


@dataclass(frozen=True)
class Button:
    label: str
    disabled: bool = False


@dataclass(frozen=True)
class PageView:
    placeholder: str
    suggestions: list[str]
    selected_suggestion: int
    heading: str | None
    chips: list[Chip] = field(default_factory=list)
    clear_all: Button | None = None
    generate: Button | None = None
    voice: Button | None = None
    voice_notice: str | None = None
    voice_transcript: str | None = None
    error: str | None = None


def ingredient_chips(session: RecipeSession) -> list[Chip]:
    return [Chip(label=item, remove_label=f"Remove {item}") for item in session.ingredients]


def generate_button(session: RecipeSession) -> Button | None:
    if not session.ingredients:
        return None
    if session.loading:
        return Button("Generating...", disabled=True)
    return Button("Generate Recipe")


def render_page(session: RecipeSession) -> PageView:
    box = session.input
    voice = session.voice
    has_items = len(session.ingredients) > 0

    voice_button = None
    voice_notice = VOICE_UNSUPPORTED
    if voice.supported:
        voice_button = Button("Listening..." if voice.is_listening else "Voice Input")
        voice_notice = VOICE_HINT if voice.is_listening else None

    return PageView(
        placeholder=INPUT_PLACEHOLDER,
        suggestions=list(box.suggestions) if box.show_suggestions else [],
        selected_suggestion=box.selected_index,
        heading=f"Your Ingredients ({len(session.ingredients)})" if has_items else None,
        chips=ingredient_chips(session),
        clear_all=Button("Clear All") if has_items else None,
        generate=generate_button(session),
        voice=voice_button,
        voice_notice=voice_notice,
        voice_transcript=f"Heard: {voice.transcript}" if voice.transcript else None,
        error=session.error,
    )
