# pokedexcli

A small library for reading the public Pokemon web API (PokeAPI). It
has typed records for location areas and Pokemon, functions that fetch
and decode them, and a thread-safe in-memory cache whose entries expire
after a fixed interval.

## Installation

```
pip install .
```

The package uses only the standard library.

## The cache: `pokedexcli.cache`

`Cache(interval)` stores `bytes` values by string key. `interval` is a
number of seconds or a `datetime.timedelta`. It must be positive, or
`ValueError` is raised. A background daemon thread wakes once per
interval and removes every entry older than the interval.

- `add(key, value)` adds or replaces an entry.
- `get(key)` returns the stored bytes, or `None` if there is no entry.
- `len(cache)` and `key in cache` work as expected.
- `close()` stops the background thread. The cache is also a context
  manager and calls `close()` on exit.

```python
from datetime import timedelta
from pokedexcli.cache import Cache

with Cache(timedelta(minutes=5)) as cache:
    cache.add("https://example.com", b"testdata")
    assert cache.get("https://example.com") == b"testdata"
```

## The API client: `pokedexcli.api`

Constants: `BASE_URL`, `POKEMON_ENDPOINT`, `LOCATION_AREA_ENDPOINT` and
`FIRST_LOCATION_PAGE_URL`, which is the first page of 20 location areas.

URL helpers:

- `location_area_url(area)` returns the URL of a named location area.
- `pokemon_url(name)` returns the URL of a named Pokemon.

Fetching:

- `fetch_json(url)` sends a GET request and returns the decoded JSON. It
  prints the URL to standard output first. If the status is not 200, the
  request fails or the body is not valid JSON, it raises `ApiError`.
- `fetch_poke_location(url)` returns a `PokeLocation`.
- `fetch_poke_location_detail(url)` returns a `PokeLocationDetails`.
- `fetch_pokemon_detail(url)` returns a `PokemonDetails`.

Records are frozen dataclasses. Each has `from_dict(data)` and
`to_dict()`, so a record can be stored as JSON, for example in the
cache, and read back. In the input, missing or `null` fields become
zero, an empty string, `False` or an empty list. A field of the wrong
JSON type raises `ApiError`.

- `NamedResource`: `name`, `url`.
- `PokeLocation`: `count`, `next`, `previous` (a URL or `None`) and
  `results`, a list of `NamedResource`.
- `EncounterSummary`: `pokemon`, a `NamedResource`.
- `PokeLocationDetails`: `id`, `name`, `game_index`, `location` and
  `pokemon_encounters`.
- `PokemonStat`: `base_stat`, `effort`, `stat`.
- `PokemonDetails`: `id`, `name`, `base_experience`, `height`, `weight`,
  `order`, `is_default`, `stats` (a list of `PokemonStat`) and `types`
  (a list of `NamedResource`).

```python
import json
from pokedexcli import api
from pokedexcli.cache import Cache

cache = Cache(300)
url = api.FIRST_LOCATION_PAGE_URL
page = api.fetch_poke_location(url)
cache.add(url, json.dumps(page.to_dict()).encode())
again = api.PokeLocation.from_dict(json.loads(cache.get(url)))
print([area.name for area in again.results])
cache.close()
```

## What this package does not do

The package has no interactive prompt and installs no command. It does
not keep a Pokedex of caught Pokemon and has no catch logic. Code that
wants these has to build them on the cache and the API client.

## Running the tests

```
pip install ".[test]"
pytest
```