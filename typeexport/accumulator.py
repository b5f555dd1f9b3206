"""Ordered buffer of enum and type-alias declarations shared by a run."""

from __future__ import annotations

from .models import ResolvedSymbol


class GlobalAccumulator:
    def __init__(self) -> None:
        self._symbols: list[ResolvedSymbol] = []
        self._keys: set[tuple[str, str, str]] = set()
        self._entries: list[str] = []
        self._aliases: set[str] = set()

    def add(self, symbol: ResolvedSymbol) -> bool:
        """Append ``symbol`` unless the same declaration was already added.

        A symbol imported under another local name also gets an alias
        declaration, so the name used by the property type is declared.
        """
        added = False
        if symbol.key not in self._keys:
            self._keys.add(symbol.key)
            self._symbols.append(symbol)
            self._entries.append(symbol.text)
            added = True

        alias = symbol.alias_declaration
        if alias is not None and alias not in self._aliases:
            self._aliases.add(alias)
            self._entries.append(alias)
            added = True
        return added

    @property
    def symbols(self) -> list[ResolvedSymbol]:
        return list(self._symbols)

    def render(self) -> str:
        return "".join(f"{entry}\n\n" for entry in self._entries)
