"""Star Wars characters, starships and reviews behind an example schema."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Union

__all__ = [
    "SCHEMA",
    "Human",
    "Droid",
    "Starship",
    "Review",
    "ReviewInput",
    "HUMANS",
    "DROIDS",
    "STARSHIPS",
    "Resolver",
    "QueryResolver",
    "MutationResolver",
    "HumanResolver",
    "DroidResolver",
    "StarshipResolver",
    "ReviewResolver",
    "FriendsConnectionResolver",
    "FriendsEdgeResolver",
    "PageInfoResolver",
    "convert_length",
    "encode_cursor",
    "resolve_character",
    "resolve_characters",
]

SCHEMA = """
	schema {
		query: Query
		mutation: Mutation
	}
	# The query type, represents all of the entry points into our object graph
	type Query {
		hero(episode: Episode = NEWHOPE): Character
		reviews(episode: Episode!): [Review]!
		search(text: String!): [SearchResult]!
		character(id: ID!): Character
		droid(id: ID!): Droid
		human(id: ID!): Human
		starship(id: ID!): Starship
	}
	# The mutation type, represents all updates we can make to our data
	type Mutation {
		createReview(episode: Episode!, review: ReviewInput!): Review
	}
	# The episodes in the Star Wars trilogy
	enum Episode {
		# Star Wars Episode IV: A New Hope, released in 1977.
		NEWHOPE
		# Star Wars Episode V: The Empire Strikes Back, released in 1980.
		EMPIRE
		# Star Wars Episode VI: Return of the Jedi, released in 1983.
		JEDI
	}
	# A character from the Star Wars universe
	interface Character {
		# The ID of the character
		id: ID!
		# The name of the character
		name: String!
		# The friends of the character, or an empty list if they have none
		friends: [Character]
		# The friends of the character exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this character appears in
		appearsIn: [Episode!]!
	}
	# Units of height
	enum LengthUnit {
		# The standard unit around the world
		METER
		# Primarily used in the United States
		FOOT
	}
	# A humanoid creature from the Star Wars universe
	type Human implements Character {
		# The ID of the human
		id: ID!
		# What this human calls themselves
		name: String!
		# Height in the preferred unit, default is meters
		height(unit: LengthUnit = METER): Float!
		# Mass in kilograms, or null if unknown
		mass: Float
		# This human's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the human exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this human appears in
		appearsIn: [Episode!]!
		# A list of starships this person has piloted, or an empty list if none
		starships: [Starship]
	}
	# An autonomous mechanical character in the Star Wars universe
	type Droid implements Character {
		# The ID of the droid
		id: ID!
		# What others call this droid
		name: String!
		# This droid's friends, or an empty list if they have none
		friends: [Character]
		# The friends of the droid exposed as a connection with edges
		friendsConnection(first: Int, after: ID): FriendsConnection!
		# The movies this droid appears in
		appearsIn: [Episode!]!
		# This droid's primary function
		primaryFunction: String
	}
	# A connection object for a character's friends
	type FriendsConnection {
		# The total number of friends
		totalCount: Int!
		# The edges for each of the character's friends.
		edges: [FriendsEdge]
		# A list of the friends, as a convenience when edges are not needed.
		friends: [Character]
		# Information for paginating this connection
		pageInfo: PageInfo!
	}
	# An edge object for a character's friends
	type FriendsEdge {
		# A cursor used for pagination
		cursor: ID!
		# The character represented by this friendship edge
		node: Character
	}
	# Information for paginating this connection
	type PageInfo {
		startCursor: ID
		endCursor: ID
		hasNextPage: Boolean!
	}
	# Represents a review for a movie
	type Review {
		# The number of stars this review gave, 1-5
		stars: Int!
		# Comment about the movie
		commentary: String
	}
	# The input object sent when someone is creating a new review
	input ReviewInput {
		# 0-5 stars
		stars: Int!
		# Comment about the movie, optional
		commentary: String
	}
	type Starship {
		# The ID of the starship
		id: ID!
		# The name of the starship
		name: String!
		# Length of the starship, along the longest axis
		length(unit: LengthUnit = METER): Float!
	}
	union SearchResult = Human | Droid | Starship
"""

_FEET_PER_METER = 3.28084


@dataclass(frozen=True)
class Human:
    """A humanoid character."""

    id: str
    name: str
    friends: tuple[str, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[str, ...] = ()


@dataclass(frozen=True)
class Droid:
    """A mechanical character."""

    id: str
    name: str
    friends: tuple[str, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    """A starship and its length in meters."""

    id: str
    name: str
    length: float


@dataclass
class Review:
    """A stored review of an episode."""

    stars: int
    commentary: str | None = None


@dataclass
class ReviewInput:
    """The input for creating a review."""

    stars: int
    commentary: str | None = None


_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")

HUMANS: tuple[Human, ...] = (
    Human("1000", "Luke Skywalker", ("1002", "1003", "2000", "2001"),
          _ALL_EPISODES, 1.72, 77, ("3001", "3003")),
    Human("1001", "Darth Vader", ("1004",), _ALL_EPISODES, 2.02, 136, ("3002",)),
    Human("1002", "Han Solo", ("1000", "1003", "2001"),
          _ALL_EPISODES, 1.8, 80, ("3000", "3003")),
    Human("1003", "Leia Organa", ("1000", "1002", "2000", "2001"),
          _ALL_EPISODES, 1.5, 49),
    Human("1004", "Wilhuff Tarkin", ("1001",), ("NEWHOPE",), 1.8, 0),
)

DROIDS: tuple[Droid, ...] = (
    Droid("2000", "C-3PO", ("1000", "1002", "1003", "2001"), _ALL_EPISODES, "Protocol"),
    Droid("2001", "R2-D2", ("1000", "1002", "1003"), _ALL_EPISODES, "Astromech"),
)

STARSHIPS: tuple[Starship, ...] = (
    Starship("3000", "Millennium Falcon", 34.37),
    Starship("3001", "X-Wing", 12.5),
    Starship("3002", "TIE Advanced x1", 9.2),
    Starship("3003", "Imperial shuttle", 20.0),
)

_HUMANS_BY_ID = {h.id: h for h in HUMANS}
_DROIDS_BY_ID = {d.id: d for d in DROIDS}
_STARSHIPS_BY_ID = {s.id: s for s in STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to ``unit`` (METER or FOOT)."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * _FEET_PER_METER
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> str:
    """Return the opaque cursor for the item at ``index``."""
    return base64.b64encode(f"cursor{index + 1}".encode()).decode("ascii")


_ATOI = re.compile(r"[+-]?[0-9]+")


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"illegal base64 data in cursor {cursor!r}") from exc
    text = raw.decode("utf-8", "replace")
    if text.startswith("cursor"):
        text = text[len("cursor"):]
    if not _ATOI.fullmatch(text):
        raise ValueError(f"invalid cursor position: {text!r}")
    return int(text)


Character = Union["HumanResolver", "DroidResolver"]


def resolve_character(character_id: str) -> HumanResolver | DroidResolver | None:
    """Return a resolver for the human or droid with this id, or None."""
    human = _HUMANS_BY_ID.get(character_id)
    if human is not None:
        return HumanResolver(human)
    droid = _DROIDS_BY_ID.get(character_id)
    if droid is not None:
        return DroidResolver(droid)
    return None


def resolve_characters(ids) -> list[HumanResolver | DroidResolver]:
    """Return resolvers for the known characters among ``ids``."""
    return [c for c in map(resolve_character, ids) if c is not None]


class HumanResolver:
    """Resolves the fields of a Human."""

    def __init__(self, human: Human) -> None:
        self.human = human

    def id(self) -> str:
        return self.human.id

    def name(self) -> str:
        return self.human.name

    def height(self, unit: str = "METER") -> float:
        return convert_length(self.human.height, unit)

    def mass(self) -> float | None:
        return float(self.human.mass) if self.human.mass else None

    def friends(self) -> list[HumanResolver | DroidResolver]:
        return resolve_characters(self.human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self.human.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self.human.appears_in)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIPS_BY_ID[sid]) for sid in self.human.starships]


class DroidResolver:
    """Resolves the fields of a Droid."""

    def __init__(self, droid: Droid) -> None:
        self.droid = droid

    def id(self) -> str:
        return self.droid.id

    def name(self) -> str:
        return self.droid.name

    def friends(self) -> list[HumanResolver | DroidResolver]:
        return resolve_characters(self.droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return FriendsConnectionResolver.create(self.droid.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self.droid.appears_in)

    def primary_function(self) -> str | None:
        return self.droid.primary_function or None


class StarshipResolver:
    """Resolves the fields of a Starship."""

    def __init__(self, starship: Starship) -> None:
        self.starship = starship

    def id(self) -> str:
        return self.starship.id

    def name(self) -> str:
        return self.starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self.starship.length, unit)


class ReviewResolver:
    """Resolves the fields of a Review."""

    def __init__(self, review: Review) -> None:
        self.review = review

    def stars(self) -> int:
        return self.review.stars

    def commentary(self) -> str | None:
        return self.review.commentary


class FriendsEdgeResolver:
    """One friend together with its cursor."""

    def __init__(self, cursor: str, character_id: str) -> None:
        self._cursor = cursor
        self._id = character_id

    def cursor(self) -> str:
        return self._cursor

    def node(self) -> HumanResolver | DroidResolver | None:
        return resolve_character(self._id)


class PageInfoResolver:
    """Paging information of a friends connection."""

    def __init__(self, start_cursor: str, end_cursor: str, has_next_page: bool) -> None:
        self._start = start_cursor
        self._end = end_cursor
        self._has_next = has_next_page

    def start_cursor(self) -> str:
        return self._start

    def end_cursor(self) -> str:
        return self._end

    def has_next_page(self) -> bool:
        return self._has_next


class FriendsConnectionResolver:
    """A window onto a list of friend ids."""

    def __init__(self, ids, start: int, stop: int) -> None:
        self.ids = tuple(ids)
        self.start = start
        self.stop = stop

    @classmethod
    def create(
        cls, ids, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        """Build the window from ``first`` and an ``after`` cursor."""
        ids = tuple(ids)
        start = _decode_cursor(after) if after is not None else 0
        stop = len(ids)
        if first is not None:
            stop = min(start + int(first), len(ids))
        return cls(ids, start, stop)

    def _window(self) -> range:
        if self.start < 0 or self.stop < self.start or self.stop > len(self.ids):
            raise IndexError(f"slice bounds out of range [{self.start}:{self.stop}]")
        return range(self.start, self.stop)

    def total_count(self) -> int:
        return len(self.ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [FriendsEdgeResolver(encode_cursor(i), self.ids[i]) for i in self._window()]

    def friends(self) -> list[HumanResolver | DroidResolver]:
        return resolve_characters(self.ids[i] for i in self._window())

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            encode_cursor(self.start),
            encode_cursor(self.stop - 1),
            self.stop < len(self.ids),
        )


SearchResult = Union[HumanResolver, DroidResolver, StarshipResolver]


class QueryResolver:
    """Resolves the root query fields."""

    def __init__(self, reviews: dict[str, list[Review]] | None = None) -> None:
        self._reviews = reviews if reviews is not None else {}

    def hero(self, episode: str = "NEWHOPE") -> HumanResolver | DroidResolver:
        if episode == "EMPIRE":
            return HumanResolver(_HUMANS_BY_ID["1000"])
        return DroidResolver(_DROIDS_BY_ID["2001"])

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return [ReviewResolver(r) for r in self._reviews.get(episode, [])]

    def search(self, text: str) -> list[SearchResult]:
        results: list[SearchResult] = [HumanResolver(h) for h in HUMANS if text in h.name]
        results += [DroidResolver(d) for d in DROIDS if text in d.name]
        results += [StarshipResolver(s) for s in STARSHIPS if text in s.name]
        return results

    def character(self, character_id: str) -> HumanResolver | DroidResolver | None:
        return resolve_character(character_id)

    def human(self, human_id: str) -> HumanResolver | None:
        human = _HUMANS_BY_ID.get(human_id)
        return HumanResolver(human) if human is not None else None

    def droid(self, droid_id: str) -> DroidResolver | None:
        droid = _DROIDS_BY_ID.get(droid_id)
        return DroidResolver(droid) if droid is not None else None

    def starship(self, starship_id: str) -> StarshipResolver | None:
        ship = _STARSHIPS_BY_ID.get(starship_id)
        return StarshipResolver(ship) if ship is not None else None


class MutationResolver:
    """Resolves the root mutation fields."""

    def __init__(self, reviews: dict[str, list[Review]] | None = None) -> None:
        self._reviews = reviews if reviews is not None else {}

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        stored = Review(stars=review.stars, commentary=review.commentary)
        self._reviews.setdefault(episode, []).append(stored)
        return ReviewResolver(stored)


class Resolver:
    """Root resolver; its query and mutation share one review store."""

    def __init__(self) -> None:
        self._reviews: dict[str, list[Review]] = {}

    def query(self) -> QueryResolver:
        return QueryResolver(self._reviews)

    def mutation(self) -> MutationResolver:
        return MutationResolver(self._reviews)