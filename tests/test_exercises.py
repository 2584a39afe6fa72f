"""Test the worked exercise solutions using pytest."""
import time

from immutabledict import immutabledict
import pytest

from pyapply.exercises import FETCH_DELAY, LOCAL_STORAGE, Comment, Post, \
    ex1, ex2, ex3, ex4, get_from_cache, render_page
from pyapply.array import Array
from pyapply.io import IO
from pyapply.maybe import Just, Nothing
from pyapply.task import Task


def test_ex1_adds_with_ap():
    assert ex1(Just(2), Just(3)) == Just(5)
    assert ex1(Nothing, Just(3)) is Nothing


def test_ex2_adds_with_lift_a2():
    assert ex2(Just(2), Just(3)) == Just(5)
    assert ex2(Just(2), Nothing) is Nothing


def test_ex3_renders_post_and_comments():
    task = ex3()
    assert isinstance(task, Task)
    assert task.run_sync() == (
        "<div>Love them futures</div>"
        "<ul><li>This book should be illegal</li>"
        "<li>Monads are like smelly shallots</li></ul>")


def test_ex3_fetches_concurrently():
    start = time.perf_counter()
    ex3(7).run_sync()
    assert time.perf_counter() - start < 2 * FETCH_DELAY


def test_render_page():
    page = render_page(Post(1, "Title"), Array.of_items(Comment(1, "hi")))
    assert page == "<div>Title</div><ul><li>hi</li></ul>"


def test_ex4_starts_game_from_cache():
    program = ex4()
    assert isinstance(program, IO)
    assert program.run() == "toby vs sally"
    other = immutabledict({"player1": "ann", "player2": "bob"})
    assert ex4(other).run() == "ann vs bob"


def test_cache_is_read_when_run():
    program = get_from_cache("player3", LOCAL_STORAGE)
    with pytest.raises(KeyError):
        program.run()
