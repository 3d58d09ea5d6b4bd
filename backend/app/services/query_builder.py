"""Translate search criteria into an Elasticsearch boolean query.

The query is assembled as a small tree of clause objects and only turned into
the engine's JSON body by ``to_dict``. An empty criteria record produces a
``match_all`` query; every supplied dimension adds one ``must`` group.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.schemas.search import SearchCriteria

TEXT_FIELDS = ("title^2", "description", "company^1.5")
SUBSTRING_FIELDS = ("title", "company", "description")
FUZZINESS = "AUTO"


class Query(ABC):
    @abstractmethod
    def to_dict(self) -> dict:
        """Serialize this clause into the engine's query DSL."""


@dataclass(frozen=True)
class MatchAll(Query):
    def to_dict(self) -> dict:
        return {"match_all": {}}


@dataclass(frozen=True)
class MultiMatch(Query):
    query: str
    fields: tuple[str, ...]
    fuzziness: str | None = FUZZINESS

    def to_dict(self) -> dict:
        body = {"query": self.query, "fields": list(self.fields)}
        if self.fuzziness:
            body["fuzziness"] = self.fuzziness
        return {"multi_match": body}


@dataclass(frozen=True)
class Match(Query):
    field: str
    query: str

    def to_dict(self) -> dict:
        return {"match": {self.field: self.query}}


@dataclass(frozen=True)
class Wildcard(Query):
    field: str
    value: str
    case_insensitive: bool = True

    def to_dict(self) -> dict:
        return {
            "wildcard": {
                self.field: {"value": self.value, "case_insensitive": self.case_insensitive}
            }
        }


@dataclass(frozen=True)
class Terms(Query):
    field: str
    values: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"terms": {self.field: list(self.values)}}


@dataclass(frozen=True)
class And(Query):
    clauses: tuple[Query, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"bool": {"must": [c.to_dict() for c in self.clauses]}}


@dataclass(frozen=True)
class Or(Query):
    clauses: tuple[Query, ...] = field(default_factory=tuple)
    minimum_should_match: int = 1

    def to_dict(self) -> dict:
        return {
            "bool": {
                "should": [c.to_dict() for c in self.clauses],
                "minimum_should_match": self.minimum_should_match,
            }
        }


def escape_wildcard(text: str) -> str:
    """Escape pattern metacharacters so user text is matched literally."""
    return text.replace("\\", "\\\\").replace("*", "\\*").replace("?", "\\?")


def contains(field_name: str, text: str) -> Wildcard:
    return Wildcard(f"{field_name}.keyword", f"*{escape_wildcard(text)}*")


def text_clause(query: str) -> Or:
    return Or((
        MultiMatch(query, TEXT_FIELDS),
        *(contains(name, query) for name in SUBSTRING_FIELDS),
    ))


def location_clause(location: str) -> Or:
    return Or((Match("location", location), contains("location", location)))


def skills_clause(skills: list[str]) -> Terms:
    return Terms("skills.keyword", tuple(skills))


def build(criteria: SearchCriteria) -> Query:
    if criteria.is_empty:
        return MatchAll()

    groups: list[Query] = []
    if criteria.query:
        groups.append(text_clause(criteria.query))
    if criteria.location:
        groups.append(location_clause(criteria.location))
    if criteria.skills:
        groups.append(skills_clause(criteria.skills))
    return And(tuple(groups))
