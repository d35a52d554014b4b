from dataclasses import dataclass

@dataclass(slots=True)
class TileType:
    """Per-cell symbol assignment.

    Stores only the semantic type_name (e.g. 'circle' or 'bomb').
    Glyph lookup resides in the singleton entity with SymbolRegistry + SymbolTypes.
    """
    type_name: str
