import httpx

from fridge_friend.client.session import RecipeSession
from fridge_friend.client.view import render_page
from fridge_friend.client.voice import SpeechResult


def mock_http(handler):
    return httpx.Client(transport=httpx.MockTransport(handler), base_url="http://broker")


def test_end_to_end_generation(client, upstream, sample_recipe):
    session = RecipeSession(client)
    session.input.set_buffer("Chicken")
    session.input.key_down("Enter")

    recipe = session.generate()

    assert recipe == sample_recipe
    assert session.recipe == sample_recipe
    assert session.error is None
    assert not session.loading
    assert upstream.last_payload["messages"][0]["content"].count("MY INGREDIENTS: chicken") == 1


def test_generate_without_ingredients(client, upstream):
    session = RecipeSession(client)

    assert session.generate() is None
    assert session.error == "Please add at least one ingredient"
    assert upstream.requests == []


def test_server_error_message_is_shown(client, upstream):
    upstream.content = "not json"
    session = RecipeSession(client)
    session.add_ingredient("egg")

    session.generate()

    assert session.error == "Failed to parse recipe"
    assert session.recipe is None
    assert not session.loading


def test_transport_failure_is_shown():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    session = RecipeSession(mock_http(handler))
    session.add_ingredient("egg")

    session.generate()

    assert session.error == "connection refused"
    assert not session.loading


def test_error_without_body_uses_fallback():
    session = RecipeSession(mock_http(lambda request: httpx.Response(502, text="Bad Gateway")))
    session.add_ingredient("egg")

    session.generate()

    assert session.error == "Failed to generate recipe"


def test_new_recipe_replaces_previous():
    recipes = iter([{"title": "First"}, {"title": "Second"}])
    session = RecipeSession(mock_http(lambda request: httpx.Response(200, json={"recipe": next(recipes)})))
    session.add_ingredient("egg")

    session.generate()
    session.generate()

    assert session.recipe == {"title": "Second"}


def test_generate_is_refused_while_loading():
    calls = []
    session = RecipeSession(mock_http(lambda request: calls.append(request) or httpx.Response(200, json={})))
    session.add_ingredient("egg")
    session.loading = True

    assert session.generate() is None
    assert calls == []


def test_adding_ingredient_clears_error(client):
    session = RecipeSession(client)
    session.generate()
    assert session.error

    session.input.add("rice")

    assert session.error is None


def test_clear_all_resets_recipe_and_error(client):
    session = RecipeSession(client)
    session.input.add("chicken, rice")
    session.generate()
    session.error = "stale"

    session.input.clear_all()

    assert len(session.ingredients) == 0
    assert session.recipe is None
    assert session.error is None


def test_voice_ingredients_reach_the_session(client, recognizer):
    session = RecipeSession(client, recognizer_factory=lambda: recognizer)
    session.voice.toggle()

    recognizer.emit(SpeechResult("rice and eggs, rice", is_final=True))

    assert session.ingredients.as_list() == ["rice", "eggs"]


def test_render_empty_page(client):
    view = render_page(RecipeSession(client))

    assert view.placeholder == "Type ingredients (comma-separated)..."
    assert view.heading is None
    assert view.clear_all is None
    assert view.generate is None
    assert view.voice is None
    assert view.voice_notice == "Voice input not supported in this browser"


def test_render_with_ingredients(client):
    session = RecipeSession(client)
    session.input.add("chicken, tomato, onion")

    view = render_page(session)

    assert view.heading == "Your Ingredients (3)"
    assert [chip.remove_label for chip in view.chips] == [
        "Remove chicken",
        "Remove tomato",
        "Remove onion",
    ]
    assert view.clear_all.label == "Clear All"
    assert view.generate.label == "Generate Recipe"
    assert not view.generate.disabled


def test_render_while_generating(client):
    session = RecipeSession(client)
    session.add_ingredient("egg")
    session.loading = True

    button = render_page(session).generate

    assert button.label == "Generating..."
    assert button.disabled


def test_render_error_and_voice_state(client, recognizer):
    session = RecipeSession(client, recognizer_factory=lambda: recognizer)
    session.generate()
    session.voice.toggle()
    recognizer.emit(SpeechResult("tomato", is_final=False))

    view = render_page(session)

    assert view.error == "Please add at least one ingredient"
    assert view.voice.label == "Listening..."
    assert view.voice_notice == 'Say ingredients separated by commas or "and"'
    assert view.voice_transcript == "Heard: tomato"
