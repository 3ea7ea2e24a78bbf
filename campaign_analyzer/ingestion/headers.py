"""Keyword based mapping of report headers onto semantic fields."""
from __future__ import annotations

import unicodedata
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

MISSING = -1

ColumnKeywords = Tuple[Tuple[str, Tuple[str, ...]], ...]

CAMPAIGN_COLUMNS: ColumnKeywords = (
    ("name", ("nome da campanha", "campaign name", "campaign", "campanha", "nome")),
    ("spend", ("valor usado", "amount spent", "spend", "gasto", "custo", "valor")),
    ("impressions", ("impressoes", "impressions", "views")),
    ("clicks", ("cliques", "clicks", "link clicks")),
    ("results", ("resultados", "results", "leads", "conversions", "cadastro")),
)

LEAD_COLUMNS: ColumnKeywords = (
    ("id", ("id", "lead_id")),
    ("created_time", ("created_time", "data", "date")),
    ("full_name", ("full_name", "nome", "name", "nome completo")),
    ("email", ("email", "e-mail")),
    ("phone_number", ("phone_number", "telefone", "phone", "celular")),
    ("campaign_name", ("campaign_name", "campanha", "campaign")),
)


def normalize_header(text: str) -> str:
    """Case-fold *text*, strip diacritics and surrounding whitespace."""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold().strip()


class ColumnIndexMap(Mapping[str, int]):
    """Resolved column position per semantic field (``MISSING`` when absent)."""

    def __init__(self, indices: Iterable[Tuple[str, int]]) -> None:
        self._indices: Dict[str, int] = dict(indices)

    def __getitem__(self, field: str) -> int:
        return self._indices[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"ColumnIndexMap({self._indices!r})"

    def index(self, field: str) -> int:
        return self._indices.get(field, MISSING)

    def cell(self, row: Sequence[str], field: str) -> str:
        """Return the cell for *field* in *row*, or ``""`` if unavailable."""

        position = self.index(field)
        if position == MISSING or position >= len(row):
            return ""
        return row[position]

    def missing(self) -> List[str]:
        return [field for field, position in self._indices.items() if position == MISSING]


def map_columns(headers: Sequence[str], keywords: ColumnKeywords) -> ColumnIndexMap:
    """Resolve every semantic field in *keywords* against *headers*.

    Fields are processed in declared order. Each one takes the first header
    containing any of its keywords; two fields may land on the same column.
    """

    normalized = [normalize_header(header) for header in headers]
    resolved: List[Tuple[str, int]] = []
    for field, candidates in keywords:
        position = MISSING
        for index, header in enumerate(normalized):
            if any(keyword in header for keyword in candidates):
                position = index
                break
        resolved.append((field, position))
    return ColumnIndexMap(resolved)


__all__ = [
    "CAMPAIGN_COLUMNS",
    "ColumnIndexMap",
    "ColumnKeywords",
    "LEAD_COLUMNS",
    "MISSING",
    "map_columns",
    "normalize_header",
]
