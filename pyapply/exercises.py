"""
Worked solutions for the applicative exercises.

    ex1: add two possibly absent numbers with Maybe and ap
    ex2: the same with lift_a2
    ex3: fetch a post and its comments concurrently, then render them
    ex4: read both players from a cache inside IO and start the game
"""
from collections.abc import Mapping
from dataclasses import dataclass
import logging
from operator import add

from immutabledict import immutabledict

from .array import Array
from .curry import curry2
from .io import IO
from .lift import lift_a2
from .maybe import Just, Maybe
from .task import Task

logger = logging.getLogger(__name__)

# simulated latency of the post and comment lookups, in seconds
FETCH_DELAY = 0.05

LOCAL_STORAGE: Mapping[str, str] = immutabledict({
    "player1": "toby",
    "player2": "sally",
})

@dataclass(frozen=True)
class Post:
    """A blog post"""
    id: int
    title: str

@dataclass(frozen=True)
class Comment:
    """A comment on a post"""
    post_id: int
    body: str


def ex1(x: Maybe[int], y: Maybe[int]) -> Maybe[int]:
    """ Just.pure(add) * x * y """
    return Just.pure(curry2(add)) * x * y

# lift_a2 with only its function supplied
ex2 = lift_a2(add)


def get_post(post_id: int) -> Task[Post]:
    """ Looks up a post after a short delay """
    return Task.sleep(FETCH_DELAY, Post(post_id, "Love them futures"))

def get_comments(post_id: int) -> Task[Array[Comment]]:
    """ Looks up the comments of a post after a short delay """
    return Task.sleep(FETCH_DELAY, Array.of_items(
        Comment(post_id, "This book should be illegal"),
        Comment(post_id, "Monads are like smelly shallots"),
    ))

def render_page(post: Post, comments: Array[Comment]) -> str:
    """ HTML for a post followed by its comments """
    items = comments.foldl(lambda acc, c: f"{acc}<li>{c.body}</li>", "")
    return f"<div>{post.title}</div><ul>{items}</ul>"

def ex3(post_id: int = 2) -> Task[str]:
    """ Both lookups start together; the page renders when both finish """
    return (curry2(render_page) & get_post(post_id)) * get_comments(post_id)


def get_from_cache(key: str,
                   cache: Mapping[str, str] = LOCAL_STORAGE) -> IO[str]:
    """ Reads key from the cache when the IO runs """
    def read() -> str:
        logger.debug("Reading %s from cache", key)
        return cache[key]
    return IO(read)

def game(player1: str, player2: str) -> str:
    """ Announces the match """
    return f"{player1} vs {player2}"

def ex4(cache: Mapping[str, str] = LOCAL_STORAGE) -> IO[str]:
    """ Starts the game with both players read from the cache """
    return lift_a2(game,
                   get_from_cache("player1", cache),
                   get_from_cache("player2", cache))
