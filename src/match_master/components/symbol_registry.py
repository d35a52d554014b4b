from dataclasses import dataclass

@dataclass(slots=True)
class SymbolRegistry:
    """Tag component marking the entity that holds canonical SymbolTypes."""
    pass
