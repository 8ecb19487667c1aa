"""In-memory property store: property -> key -> values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class ReduxError(Exception):
    """Raised when the store lacks required properties."""


def _sort_key(value: str | None) -> tuple:
    if value is None:
        return (2, 0.0, "")
    try:
        return (0, float(value), "")
    except ValueError:
        return (1, 0.0, value.lower())


class Redux:
    """Read access to property values recorded for product ids."""

    def __init__(self, data: Mapping[str, Mapping[str, Iterable[str]]]):
        self._data: dict[str, dict[str, list[str]]] = {
            prop: {key: [str(v) for v in values] for key, values in keyed.items()}
            for prop, keyed in data.items()
        }

    def get_last_val(self, property: str, key: str) -> str | None:
        """Return the last value of a property for a key, or None."""
        values = self._data.get(property, {}).get(key)
        return values[-1] if values else None

    def get_all_values(self, property: str, key: str) -> list[str] | None:
        """Return all values of a property for a key, or None if absent."""
        values = self._data.get(property, {}).get(key)
        return list(values) if values is not None else None

    def has_key(self, property: str, key: str) -> bool:
        return key in self._data.get(property, {})

    def has_value(self, property: str, key: str, value: str) -> bool:
        return value in self._data.get(property, {}).get(key, ())

    def keys(self, property: str) -> list[str]:
        return list(self._data.get(property, {}))

    def must_have(self, *args: str) -> None:
        """Raise ReduxError if any of the given properties is not held."""
        missing = [prop for prop in args if prop not in self._data]
        if missing:
            raise ReduxError("missing properties: " + ", ".join(missing))

    def match(
        self, query: Mapping[str, str | Iterable[str]], full_match: bool = False
    ) -> list[str]:
        """Return ids whose values match every held property in the query.

        Terms compare case-insensitively, as substrings unless full_match.
        """
        criteria: dict[str, list[str]] = {}
        for prop, terms in query.items():
            if prop not in self._data:
                continue
            if isinstance(terms, str):
                terms = [terms]
            cleaned = [t.strip().lower() for t in terms if t.strip()]
            if cleaned:
                criteria[prop] = cleaned
        if not criteria:
            return []

        def matches(values: list[str], terms: list[str]) -> bool:
            lowered = [v.lower() for v in values]
            if full_match:
                return any(t in lowered for t in terms)
            return any(t in v for t in terms for v in lowered)

        candidates: set[str] | None = None
        for prop, terms in criteria.items():
            found = {
                key
                for key, values in self._data[prop].items()
                if matches(values, terms)
            }
            candidates = found if candidates is None else candidates & found
        return sorted(candidates or ())

    def sort(self, ids: Iterable[str], desc: bool, *args: str) -> list[str]:
        """Order ids by the given properties; desc applies to the first."""
        self.must_have(*args)
        ordered = sorted(ids)
        for position, prop in reversed(list(enumerate(args))):
            ordered.sort(
                key=lambda key, prop=prop: _sort_key(self.get_last_val(prop, key)),
                reverse=desc and position == 0,
            )
        return ordered