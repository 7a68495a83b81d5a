"""
Symbol table and scope management for DEC.

A SymbolTable is one lexical scope: an insertion-ordered mapping from
variable names to scalar values, chained to the table of the enclosing
scope. The parser records declared names (with no value yet) in the table
of each block; the evaluator and the name analyzer build their own chains
of tables at run time.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

Value = Union[int, float]

_MISSING = object()


class SymbolTable:
    """
    Scope with an optional parent scope.

    Lookups walk outwards through the parents; writes only ever touch the
    local scope.
    """

    def __init__(self, parent: Optional['SymbolTable'] = None):
        self.parent = parent
        self.symbols: Dict[str, Optional[Value]] = {}

    def define(self, name: str, value: Optional[Value] = None) -> None:
        """Insert or replace a binding in this scope, keeping first-insertion order."""
        self.symbols[name] = value

    assign = define

    def lookup(self, name: str) -> Optional[Value]:
        """
        Look up a name in this scope and then in the enclosing scopes.

        Raises:
            KeyError: If no scope in the chain binds the name
        """
        value = self._find(name)
        if value is _MISSING:
            raise KeyError(name)
        return value

    def lookup_local(self, name: str) -> Optional[Value]:
        """Look up a name only in this scope (no parent traversal)."""
        return self.symbols[name]

    def get(self, name: str, default: Optional[Value] = None) -> Optional[Value]:
        value = self._find(name)
        return default if value is _MISSING else value

    def _find(self, name: str):
        table = self
        while table is not None:
            if name in table.symbols:
                return table.symbols[name]
            table = table.parent
        return _MISSING

    def contains(self, name: str) -> bool:
        """Check whether a name is bound in this or an enclosing scope."""
        return self._find(name) is not _MISSING

    def contains_local(self, name: str) -> bool:
        return name in self.symbols

    def remove(self, name: str) -> None:
        """Remove a local binding; raises KeyError when it is not bound here."""
        del self.symbols[name]

    def clear(self) -> None:
        self.symbols.clear()

    def new_scope(self) -> 'SymbolTable':
        """Create a child scope of this table."""
        return SymbolTable(parent=self)

    @property
    def depth(self) -> int:
        """Number of enclosing scopes above this one."""
        depth = 0
        table = self.parent
        while table is not None:
            depth += 1
            table = table.parent
        return depth

    def names(self) -> List[str]:
        return list(self.symbols.keys())

    def items(self) -> List[Tuple[str, Optional[Value]]]:
        return list(self.symbols.items())

    def to_dict(self) -> Dict[str, Optional[Value]]:
        return dict(self.symbols)

    def get_all_names(self) -> List[str]:
        """All names visible from this scope, innermost first."""
        seen: List[str] = []
        table = self
        while table is not None:
            for name in table.symbols:
                if name not in seen:
                    seen.append(name)
            table = table.parent
        return seen

    def get_similar_names(self, name: str, max_distance: int = 2) -> List[str]:
        """Get visible names similar to the given name (for error suggestions)."""
        def levenshtein_distance(s1: str, s2: str) -> int:
            """Calculate edit distance between two strings."""
            if len(s1) < len(s2):
                return levenshtein_distance(s2, s1)

            if len(s2) == 0:
                return len(s1)

            previous_row = list(range(len(s2) + 1))
            for i, c1 in enumerate(s1):
                current_row = [i + 1]
                for j, c2 in enumerate(s2):
                    insertions = previous_row[j + 1] + 1
                    deletions = current_row[j] + 1
                    substitutions = previous_row[j] + (c1 != c2)
                    current_row.append(min(insertions, deletions, substitutions))
                previous_row = current_row

            return previous_row[-1]

        similar_names = []
        for symbol_name in self.get_all_names():
            distance = levenshtein_distance(name.lower(), symbol_name.lower())
            if distance <= max_distance:
                similar_names.append((symbol_name, distance))

        # Sort by distance and return names only
        similar_names.sort(key=lambda x: x[1])
        return [similar for similar, _ in similar_names[:5]]

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __str__(self) -> str:
        if not self.symbols:
            return "{ }"
        body = ", ".join(f"{name} : {value}" for name, value in self.symbols.items())
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"SymbolTable(depth={self.depth}, symbols={self.symbols!r})"
