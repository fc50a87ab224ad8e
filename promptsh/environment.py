"""The shell's own copy of the environment, kept as NAME=value entries."""

from collections.abc import Iterable, Iterator, Mapping

from .text import format_int, parse_int


def _entry_name(entry: str) -> str:
    return entry.lstrip("=").partition("=")[0]


class Environment:
    """An ordered list of ``NAME=value`` entries."""

    def __init__(self, entries: Iterable[str]) -> None:
        self._entries = list(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a name-to-value mapping."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> str | None:
        """Return the value of the first entry starting with ``name``, or None."""
        for entry in self._entries:
            if entry.startswith(name):
                return entry[len(name) + 1:]
        return None

    def set(self, name: str, value: str) -> None:
        """Replace the entry for ``name`` in place, or append a new one."""
        new_entry = f"{name}={value}"
        for index, entry in enumerate(self._entries):
            if _entry_name(entry) == name and entry[len(name):len(name) + 1] == "=":
                self._entries[index] = new_entry
                return
        self._entries.append(new_entry)

    def unset(self, name: str) -> bool:
        """Remove the last entry named ``name``; return whether one was removed."""
        matches = [i for i, entry in enumerate(self._entries) if _entry_name(entry) == name]
        if not matches:
            return False
        del self._entries[matches[-1]]
        return True

    def lines(self) -> list[str]:
        """Return a copy of the entries in order."""
        return list(self._entries)

    def to_dict(self) -> dict[str, str]:
        """Return the entries as a name-to-value dictionary."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, _, value = entry.partition("=")
            result[name] = value
        return result

    def increment_shlvl(self) -> None:
        """Raise SHLVL by one, treating a missing or malformed value as 0."""
        current = self.get("SHLVL")
        level = parse_int(current) if current is not None else 0
        self.set("SHLVL", format_int(level + 1))