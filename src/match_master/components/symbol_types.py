from dataclasses import dataclass, field
from typing import Dict, Iterable, List

@dataclass(slots=True)
class SymbolTypes:
    """Canonical symbol definitions stored on a single entity.

    glyphs maps every known symbol (the bomb included) to its display glyph.
    Only spawnable symbols are handed out by the board generator.
    """
    glyphs: Dict[str, str]
    spawnable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.set_spawnable(self.spawnable or self.glyphs.keys())

    def glyph_for(self, type_name: str) -> str:
        return self.glyphs.get(type_name, '?')

    def spawnable_types(self) -> List[str]:
        return list(self.spawnable)

    def set_spawnable(self, type_names: Iterable[str]) -> None:
        # Preserve order while filtering unknown and duplicate names.
        seen: set[str] = set()
        filtered: List[str] = []
        for name in type_names:
            if name in self.glyphs and name not in seen:
                filtered.append(name)
                seen.add(name)
        if not filtered:
            raise ValueError("at least one spawnable symbol is required")
        self.spawnable = filtered
