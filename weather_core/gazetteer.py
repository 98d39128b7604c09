"""Built-in list of US cities and states used for place-name lookups."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .entities import Point


@dataclass(frozen=True)
class State:
    name: str
    abbr: str


DEFAULT_POINT = Point(name="New York", state="NY", latitude=40.7128, longitude=-74.0060)

CITIES: List[Point] = [
    DEFAULT_POINT,
    Point(name="Los Angeles", state="CA", latitude=34.0522, longitude=-118.2437),
    Point(name="Houston", state="TX", latitude=29.7604, longitude=-95.3698),
    Point(name="Miami", state="FL", latitude=25.7617, longitude=-80.1918),
    Point(name="Chicago", state="IL", latitude=41.8781, longitude=-87.6298),
    Point(name="Phoenix", state="AZ", latitude=33.4484, longitude=-112.0740),
    Point(name="San Francisco", state="CA", latitude=37.7749, longitude=-122.4194),
    Point(name="Seattle", state="WA", latitude=47.6062, longitude=-122.3321),
    Point(name="Denver", state="CO", latitude=39.7392, longitude=-104.9903),
    Point(name="New Orleans", state="LA", latitude=29.9511, longitude=-90.0715),
    Point(name="Dallas", state="TX", latitude=32.7767, longitude=-96.7970),
    Point(name="Atlanta", state="GA", latitude=33.7490, longitude=-84.3880),
]

STATES: List[State] = [
    State(name, abbr)
    for name, abbr in (
        ("Alabama", "AL"), ("Alaska", "AK"), ("Arizona", "AZ"), ("Arkansas", "AR"),
        ("California", "CA"), ("Colorado", "CO"), ("Connecticut", "CT"), ("Delaware", "DE"),
        ("Florida", "FL"), ("Georgia", "GA"), ("Hawaii", "HI"), ("Idaho", "ID"),
        ("Illinois", "IL"), ("Indiana", "IN"), ("Iowa", "IA"), ("Kansas", "KS"),
        ("Kentucky", "KY"), ("Louisiana", "LA"), ("Maine", "ME"), ("Maryland", "MD"),
        ("Massachusetts", "MA"), ("Michigan", "MI"), ("Minnesota", "MN"), ("Mississippi", "MS"),
        ("Missouri", "MO"), ("Montana", "MT"), ("Nebraska", "NE"), ("Nevada", "NV"),
        ("New Hampshire", "NH"), ("New Jersey", "NJ"), ("New Mexico", "NM"), ("New York", "NY"),
        ("North Carolina", "NC"), ("North Dakota", "ND"), ("Ohio", "OH"), ("Oklahoma", "OK"),
        ("Oregon", "OR"), ("Pennsylvania", "PA"), ("Rhode Island", "RI"), ("South Carolina", "SC"),
        ("South Dakota", "SD"), ("Tennessee", "TN"), ("Texas", "TX"), ("Utah", "UT"),
        ("Vermont", "VT"), ("Virginia", "VA"), ("Washington", "WA"), ("West Virginia", "WV"),
        ("Wisconsin", "WI"), ("Wyoming", "WY"),
    )
]


def find_city(name: str) -> Optional[Point]:
    """Match a city by name or by state abbreviation, case-insensitively."""
    needle = name.strip().lower()
    for city in CITIES:
        if city.name.lower() == needle or city.state.lower() == needle:
            return city
    return None


def resolve_point(
    city: Optional[str] = None,
    state: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> Point:
    """Pick the point to query.

    A known city wins, then explicit coordinates (labelled with whatever
    name was passed), then :data:`DEFAULT_POINT`.
    """
    if city:
        found = find_city(city)
        if found is not None:
            return found
    label = city or DEFAULT_POINT.name
    region = state or DEFAULT_POINT.state
    if latitude is not None and longitude is not None:
        return Point(name=label, state=region, latitude=latitude, longitude=longitude)
    return Point(name=label, state=region, latitude=DEFAULT_POINT.latitude, longitude=DEFAULT_POINT.longitude)


def default_panel(size: int = 8) -> List[Point]:
    return CITIES[:size]


def search(term: str) -> Dict[str, list]:
    needle = term.strip().lower()
    return {
        "cities": [c for c in CITIES if needle in c.name.lower() or needle in c.state.lower()],
        "states": [s for s in STATES if needle in s.name.lower() or needle in s.abbr.lower()],
    }


__all__ = ["CITIES", "DEFAULT_POINT", "STATES", "State", "default_panel", "find_city", "resolve_point", "search"]
