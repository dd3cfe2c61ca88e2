from datetime import timedelta

import pytest

from gqlcore.cache import Hint, HintCollector, Scope, add_hint, hintable


def test_hint_string_public():
    hint = Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC)
    assert str(hint) == "public, max-age=3600"


def test_hint_string_private():
    hint = Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE)
    assert str(hint) == "private, max-age=60"


def test_hint_without_max_age_cannot_be_rendered():
    with pytest.raises(ValueError):
        str(Hint())


def test_empty_collector_resolves_to_no_cache():
    assert HintCollector().resolve() == Hint(max_age=timedelta(0), scope=Scope.PUBLIC)


def test_collector_takes_shortest_age_and_private_scope():
    collector = HintCollector()
    collector.add(Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
    collector.add(Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
    collector.add(Hint(max_age=None, scope=Scope.PUBLIC))
    assert collector.resolve() == Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE)


def test_hintable_context_collects_hints():
    original = {"other": 1}
    ctx, collector = hintable(original)
    add_hint(ctx, Hint(max_age=timedelta(seconds=30), scope=Scope.PUBLIC))
    add_hint(ctx, Hint(max_age=timedelta(seconds=90), scope=Scope.PUBLIC))
    assert collector.resolve() == Hint(max_age=timedelta(seconds=30), scope=Scope.PUBLIC)
    assert ctx["other"] == 1
    assert original == {"other": 1}


def test_add_hint_ignores_plain_context():
    ctx = {"other": 1}
    add_hint(ctx, Hint(max_age=timedelta(seconds=5)))
    add_hint(None, Hint(max_age=timedelta(seconds=5)))
    assert ctx == {"other": 1}