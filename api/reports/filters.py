"""
Builders for the two reports whose SQL depends on user input.

Neither builder ever splices user text into SQL. The ship filter turns a
whitespace-separated expression into a WHERE clause made only of allow-listed
columns, allow-listed operators and `$n` placeholders. The projection builder
accepts only fixed "Table.Column" strings.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from core.errors import QueryValidationError

SHIP_QUERY_OPERATORS = frozenset({"=", "<", "<=", ">", ">=", "!=", "AND", "OR"})

# Column -> table alias in the Ship1 s1 LEFT JOIN Ship2 s2 query.
SHIP_QUERY_COLUMNS = {
    "Owner": "s1",
    "ShipName": "s1",
    "ShipSize": "s1",
    "ShippingRouteName": "s1",
    "DockedAtPortAddress": "s1",
    "Capacity": "s2",
}

# DOUBLE PRECISION columns; the rest are text.
SHIP_QUERY_NUMERIC_COLUMNS = frozenset({"ShipSize", "Capacity"})

_STRING_LITERAL = re.compile(r"^'.*'$")
_NUMBER_LITERAL = re.compile(r"^\d+(\.\d+)?$")

SHIPPING_ROUTE_ATTRIBUTES = (
    "ShippingRoute1.AnnualVolumeOfGoods",
    "ShippingRoute1.OriginCountryName",
    "ShippingRoute1.TerminalCountryName",
    "ShippingRoute2.Name",
    "ShippingRoute2.Length",
)


def parse_ship_query(text: str) -> tuple[str, list[Any]]:
    """
    Turn e.g. "ShipSize > 50 AND Owner = 'Evergreen'" into
    ("s1.ShipSize > $1 AND s1.Owner = $2", [50.0, "Evergreen"]).

    Tokens are kept in input order; there is no precedence or grouping, so
    a malformed boolean expression still reaches the database and fails
    there. Any token that is not an operator, a known column or a literal
    raises QueryValidationError, as does a literal of the wrong type for
    the column it is compared with (`Owner = 5`, `ShipSize > 'big'`).
    """
    tokens = (text or "").split()
    if not tokens:
        raise QueryValidationError("Query must not be empty.")

    parts: list[str] = []
    params: list[Any] = []
    # Column and literal kinds seen since the last AND/OR.
    columns: list[str] = []
    literals: list[bool] = []
    for token in tokens:
        if token.upper() in SHIP_QUERY_OPERATORS:
            parts.append(token.upper())
            if token.upper() in ("AND", "OR"):
                columns, literals = [], []
            continue
        if token in SHIP_QUERY_COLUMNS:
            parts.append(f"{SHIP_QUERY_COLUMNS[token]}.{token}")
            columns.append(token)
        elif _STRING_LITERAL.match(token):
            params.append(token[1:-1])
            parts.append(f"${len(params)}")
            literals.append(False)
        elif _NUMBER_LITERAL.match(token):
            params.append(float(token))
            parts.append(f"${len(params)}")
            literals.append(True)
        else:
            raise QueryValidationError(f"Invalid token: {token}")
        _check_literal_types(columns, literals)

    return " ".join(parts), params


def _check_literal_types(columns: list[str], literals: list[bool]) -> None:
    for column in columns:
        numeric = column in SHIP_QUERY_NUMERIC_COLUMNS
        for is_number in literals:
            if is_number != numeric:
                kind = "a number" if numeric else "a quoted string"
                raise QueryValidationError(f"{column} must be compared with {kind}.")


def build_projection(attributes: Iterable[str]) -> str:
    """
    Validate projection attributes and return the SELECT list.

    Every attribute must be one of SHIPPING_ROUTE_ATTRIBUTES. Repeats are
    dropped, first occurrence wins.
    """
    selected: list[str] = []
    for attribute in attributes:
        if attribute not in SHIPPING_ROUTE_ATTRIBUTES:
            raise QueryValidationError(f"Attribute not allowed: {attribute}")
        if attribute not in selected:
            selected.append(attribute)

    if not selected:
        raise QueryValidationError("No attributes selected.")
    return ", ".join(selected)
