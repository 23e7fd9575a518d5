"""Sales question interpreter: free text to a (period, scope) request.

Keyword matching only: every rule is a plain substring test against the
lower-cased question, evaluated in the order the tables below declare.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from shop_manager.core.exceptions import EmptyQueryError
from shop_manager.domain.schemas.product import ProductFilter


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"


class ScopeKind(str, Enum):
    UNSCOPED = "unscoped"
    TYPE = "type"
    CATEGORY = "category"
    NAME = "name"


class Scope(BaseModel):
    kind: ScopeKind = ScopeKind.UNSCOPED
    value: Optional[str] = None

    model_config = {"frozen": True}

    def to_payload(self) -> dict:
        """Echo form: {"type": "hair"}, {"category": ...}, {"name": ...} or {}."""
        if self.kind is ScopeKind.UNSCOPED:
            return {}
        return {self.kind.value: self.value}

    def to_filter(self) -> ProductFilter:
        return ProductFilter(**self.to_payload())


class InterpretedRequest(BaseModel):
    period: Period = Period.DAY
    scope: Scope = Scope()

    model_config = {"frozen": True}

    def to_payload(self) -> dict:
        return {"period": self.period.value, "scope": self.scope.to_payload()}


# Later rules override earlier ones
PERIOD_RULES: tuple[tuple[tuple[str, ...], Period], ...] = (
    (("week", "weekly", "this week"), Period.WEEK),
    (("today",), Period.DAY),
    (("per day", "daily"), Period.DAY),
)

# First match wins; a type keyword beats any category keyword
TYPE_KEYWORDS: tuple[str, ...] = ("hair", "perfume", "skin")

CATEGORY_KEYWORDS: tuple[str, ...] = (
    "shampoo",
    "conditioner",
    "gucci",
    "victoria secret",
    "victoria_secret",
    "body lotion",
    "body_lotion",
    "moisturizer",
)

# Substrings, not words: "for" is also removed from inside "comfort"
STOP_PHRASES: tuple[str, ...] = (
    r"sales",
    r"sale",
    r"revenue",
    r"for",
    r"of",
    r"what",
    r"show",
    r"get",
    r"how\s+many",
    r"how\s+much",
    r"today",
    r"weekly",
    r"this\s+week",
    r"per\s+day",
)

STOP_PHRASE_RE = re.compile("|".join(STOP_PHRASES), re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")


def resolve_period(text: str) -> Period:
    period = Period.DAY
    for keywords, result in PERIOD_RULES:
        if any(keyword in text for keyword in keywords):
            period = result
    return period


def resolve_scope(text: str) -> Scope:
    for keyword in TYPE_KEYWORDS:
        if keyword in text:
            return Scope(kind=ScopeKind.TYPE, value=keyword)

    for keyword in CATEGORY_KEYWORDS:
        if keyword in text:
            return Scope(kind=ScopeKind.CATEGORY, value=WHITESPACE_RE.sub("_", keyword))

    remainder = STOP_PHRASE_RE.sub("", text).strip()
    if remainder:
        return Scope(kind=ScopeKind.NAME, value=remainder)

    return Scope()


def interpret(text: Optional[str]) -> InterpretedRequest:
    """Turn a sales question into an interpreted request.

    Raises:
        EmptyQueryError: the question is missing or only whitespace.

    Example:
        >>> interpret("weekly hair sales").to_payload()
        {'period': 'week', 'scope': {'type': 'hair'}}
    """
    normalized = (text or "").lower().strip()
    if not normalized:
        raise EmptyQueryError()

    return InterpretedRequest(period=resolve_period(normalized), scope=resolve_scope(normalized))
