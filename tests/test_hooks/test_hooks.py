"""Tests for filters and the event bus."""

from global_styles.annotations import AnnotatedClass
from global_styles.hooks import (
    AnnotatedClassesFound,
    CssSaved,
    CssSaveFailed,
    EventBus,
    FilterRegistry,
)


class TestFilterRegistry:
    def test_apply_without_callbacks_returns_value(self):
        filters = FilterRegistry()
        assert filters.apply("hints", {"a": ""}) == {"a": ""}
        assert not filters.has("hints")

    def test_callbacks_chain_in_order(self):
        filters = FilterRegistry()
        filters.add("pre-save", lambda css: css + "a")
        filters.add("pre-save", lambda css: css + "b")
        assert filters.has("pre-save")
        assert filters.apply("pre-save", "") == "ab"

    def test_remove(self):
        filters = FilterRegistry()
        cb = lambda css: css.upper()  # noqa: E731
        filters.add("minimize", cb)
        assert filters.remove("minimize", cb) is True
        assert filters.remove("minimize", cb) is False
        assert not filters.has("minimize")


class TestEventBus:
    def test_subscribe_by_type(self):
        bus = EventBus()
        seen = []
        bus.subscribe(CssSaved, seen.append)
        bus.emit(CssSaved(css="a{}", path="/tmp/x.css"))
        bus.emit(CssSaveFailed(reason="file"))
        assert seen == [CssSaved(css="a{}", path="/tmp/x.css", persisted=True)]

    def test_on_all_runs_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(CssSaveFailed, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(CssSaveFailed(reason="database"))
        assert order == ["all", "typed"]

    def test_has_listeners(self):
        bus = EventBus()
        assert not bus.has_listeners(AnnotatedClassesFound)
        bus.subscribe(AnnotatedClassesFound, lambda e: None)
        assert bus.has_listeners(AnnotatedClassesFound)

    def test_event_payload(self):
        event = AnnotatedClassesFound(classes=(AnnotatedClass("lead"),))
        assert event.classes[0].name == "lead"
