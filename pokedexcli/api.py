"""Client for the Pokemon web API and the records it returns."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any

BASE_URL = "https://pokeapi.co/api/v2"
POKEMON_ENDPOINT = "pokemon"
LOCATION_AREA_ENDPOINT = "location-area"
FIRST_LOCATION_PAGE_URL = f"{BASE_URL}/{LOCATION_AREA_ENDPOINT}?offset=0&limit=20"


class ApiError(Exception):
    """Raised when a request fails or a response cannot be decoded."""


def _mapping(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ApiError(f"expected an object for {what}")
    return value


def _items(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError(f"expected an array for {what}")
    return value


def _int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ApiError(f"expected an integer for {what}")
    return value


def _bool(value: Any, what: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ApiError(f"expected a boolean for {what}")
    return value


def _str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ApiError(f"expected a string for {what}")
    return value


def _optional_str(value: Any, what: str) -> str | None:
    if value is None:
        return None
    return _str(value, what)


@dataclass(frozen=True)
class NamedResource:
    """A name and the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "resource")
        return cls(name=_str(data.get("name"), "name"), url=_str(data.get("url"), "url"))

    def to_dict(self) -> dict:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class PokeLocation:
    """One page of location areas."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokeLocation:
        data = _mapping(data, "location page")
        return cls(
            count=_int(data.get("count"), "count"),
            next=_optional_str(data.get("next"), "next"),
            previous=_optional_str(data.get("previous"), "previous"),
            results=[NamedResource.from_dict(item) for item in _items(data.get("results"), "results")],
        )

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "next": self.next,
            "previous": self.previous,
            "results": [result.to_dict() for result in self.results],
        }


@dataclass(frozen=True)
class EncounterSummary:
    """A Pokemon that can be encountered in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> EncounterSummary:
        data = _mapping(data, "pokemon encounter")
        return cls(pokemon=NamedResource.from_dict(data.get("pokemon")))

    def to_dict(self) -> dict:
        return {"pokemon": self.pokemon.to_dict()}


@dataclass(frozen=True)
class PokeLocationDetails:
    """A single location area and the Pokemon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[EncounterSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokeLocationDetails:
        data = _mapping(data, "location area")
        return cls(
            id=_int(data.get("id"), "id"),
            name=_str(data.get("name"), "name"),
            game_index=_int(data.get("game_index"), "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=[
                EncounterSummary.from_dict(item)
                for item in _items(data.get("pokemon_encounters"), "pokemon_encounters")
            ],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "game_index": self.game_index,
            "location": self.location.to_dict(),
            "pokemon_encounters": [enc.to_dict() for enc in self.pokemon_encounters],
        }


@dataclass(frozen=True)
class PokemonStat:
    """A base stat value of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            base_stat=_int(data.get("base_stat"), "base_stat"),
            effort=_int(data.get("effort"), "effort"),
            stat=NamedResource.from_dict(data.get("stat")),
        )

    def to_dict(self) -> dict:
        return {"base_stat": self.base_stat, "effort": self.effort, "stat": self.stat.to_dict()}


@dataclass(frozen=True)
class PokemonDetails:
    """The parts of a Pokemon record that the Pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonDetails:
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data.get("id"), "id"),
            name=_str(data.get("name"), "name"),
            base_experience=_int(data.get("base_experience"), "base_experience"),
            height=_int(data.get("height"), "height"),
            weight=_int(data.get("weight"), "weight"),
            order=_int(data.get("order"), "order"),
            is_default=_bool(data.get("is_default"), "is_default"),
            stats=[PokemonStat.from_dict(item) for item in _items(data.get("stats"), "stats")],
            types=[
                NamedResource.from_dict(_mapping(item, "type").get("type"))
                for item in _items(data.get("types"), "types")
            ],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "base_experience": self.base_experience,
            "height": self.height,
            "weight": self.weight,
            "order": self.order,
            "is_default": self.is_default,
            "stats": [stat.to_dict() for stat in self.stats],
            "types": [{"type": kind.to_dict()} for kind in self.types],
        }


def location_area_url(area: str) -> str:
    """Return the URL of the named location area."""
    return f"{BASE_URL}/{LOCATION_AREA_ENDPOINT}/{area}"


def pokemon_url(name: str) -> str:
    """Return the URL of the named Pokemon."""
    return f"{BASE_URL}/{POKEMON_ENDPOINT}/{name}"


def fetch_json(url: str) -> Any:
    """GET ``url`` and return its decoded JSON body."""
    print(url)
    try:
        with urllib.request.urlopen(url) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise ApiError(f"unexpected status code: {exc.code}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise ApiError(str(exc)) from exc
    if status != 200:
        raise ApiError(f"unexpected status code: {status}")
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ApiError(f"invalid JSON response: {exc}") from exc


def fetch_poke_location(url: str) -> PokeLocation:
    """Fetch one page of location areas."""
    return PokeLocation.from_dict(fetch_json(url))


def fetch_poke_location_detail(url: str) -> PokeLocationDetails:
    """Fetch the details of one location area."""
    return PokeLocationDetails.from_dict(fetch_json(url))


def fetch_pokemon_detail(url: str) -> PokemonDetails:
    """Fetch the details of one Pokemon."""
    return PokemonDetails.from_dict(fetch_json(url))