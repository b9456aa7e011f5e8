from __future__ import annotations

from typing import Callable, Iterator, Sequence

from fridge_friend.client.dictionary import COMMON_INGREDIENTS


MAX_SUGGESTIONS = 8

KEY_ENTER = "Enter"
KEY_DOWN = "ArrowDown"
KEY_UP = "ArrowUp"
KEY_ESCAPE = "Escape"


def normalize_ingredient(raw: str) -> str:
    return raw.strip().lower()


def split_ingredients(raw: str) -> list[str]:
    if "," not in raw:
        item = normalize_ingredient(raw)
        return [item] if item else []
    return [item for item in (normalize_ingredient(part) for part in raw.split(",")) if item]


class IngredientList:
    """Ordered working set of ingredients; entries are unique by exact match."""

    def __init__(self, items: Sequence[str] = ()) -> None:
        self._items: list[str] = []
        for item in items:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def as_list(self) -> list[str]:
        return list(self._items)

    def add(self, item: str) -> bool:
        if item in self._items:
            return False
        self._items.append(item)
        return True

    def remove(self, item: str) -> bool:
        if item not in self._items:
            return False
        self._items.remove(item)
        return True

    def clear(self) -> None:
        self._items.clear()


class IngredientInput:
    """Input box state: text buffer, autocomplete suggestions and cursor.

    Committed ingredients go to ``on_add`` one at a time; without a callback
    they are stored in ``ingredients`` directly.
    """

    def __init__(
        self,
        ingredients: IngredientList | None = None,
        *,
        dictionary: Sequence[str] = COMMON_INGREDIENTS,
        on_add: Callable[[str], None] | None = None,
        on_remove: Callable[[str], None] | None = None,
        on_clear_all: Callable[[], None] | None = None,
    ) -> None:
        self.ingredients = ingredients if ingredients is not None else IngredientList()
        self.dictionary = tuple(dictionary)
        self._on_add = on_add
        self._on_remove = on_remove
        self._on_clear_all = on_clear_all
        self.buffer = ""
        self.suggestions: list[str] = []
        self.show_suggestions = False
        self.selected_index = -1

    def _refresh(self) -> None:
        if self.buffer.strip():
            needle = self.buffer.lower()
            matches = [
                item
                for item in self.dictionary
                if needle in item.lower() and item not in self.ingredients
            ]
            self.suggestions = matches[:MAX_SUGGESTIONS]
            self.show_suggestions = True
            self.selected_index = -1
        else:
            self.suggestions = []
            self.show_suggestions = False

    def _reset_buffer(self) -> None:
        self.buffer = ""
        self.suggestions = []
        self.show_suggestions = False

    def _commit(self, item: str) -> None:
        if self._on_add is not None:
            self._on_add(item)
        else:
            self.ingredients.add(item)

    def set_buffer(self, text: str) -> None:
        self.buffer = text
        self._refresh()

    def add(self, raw: str) -> list[str]:
        added: list[str] = []
        for item in split_ingredients(raw):
            if item in self.ingredients or item in added:
                continue
            self._commit(item)
            added.append(item)

        if "," in raw or added:
            self._reset_buffer()
        return added

    def remove(self, ingredient: str) -> None:
        if self._on_remove is not None:
            self._on_remove(ingredient)
        else:
            self.ingredients.remove(ingredient)
        self._refresh()

    def clear_all(self) -> None:
        if self._on_clear_all is not None:
            self._on_clear_all()
        else:
            self.ingredients.clear()
        self._refresh()

    def select_suggestion(self, suggestion: str) -> list[str]:
        return self.add(suggestion)

    def key_down(self, key: str) -> list[str]:
        if key == KEY_ENTER:
            if 0 <= self.selected_index < len(self.suggestions):
                return self.add(self.suggestions[self.selected_index])
            if self.buffer.strip():
                return self.add(self.buffer)
        elif key == KEY_DOWN:
            if self.selected_index < len(self.suggestions) - 1:
                self.selected_index += 1
        elif key == KEY_UP:
            self.selected_index = self.selected_index - 1 if self.selected_index > 0 else -1
        elif key == KEY_ESCAPE:
            self.suggestions = []
            self.show_suggestions = False
            self.selected_index = -1
        return []
