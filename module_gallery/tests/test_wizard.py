"""
Tests for the wizard module

Covers:
- Transition generation for flows of any size
- Page registry slots (which controls each page carries)
- Dispatcher listeners and the current-page selector
- Namespacing of control and selector ids
"""

import pytest

from module_gallery.modules.wizard import (
    PageRegistry,
    SelectorCell,
    Transition,
    TransitionDispatcher,
    build_transitions,
    get_dispatcher,
    page_index,
    page_title,
    unregister,
    wizard_server,
)


class TestBuildTransitions:
    """Navigation graph for n pages"""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 12])
    def test_transition_count_and_bounds(self, n):
        """2n - 2 adjacent transitions, all inside 1..n"""
        transitions = build_transitions(n)

        assert len(transitions) == max(0, 2 * n - 2)
        for t in transitions:
            assert abs(t.source - t.target) == 1
            assert 1 <= t.source <= n
            assert 1 <= t.target <= n

    def test_three_pages(self):
        pairs = {(t.source, t.target) for t in build_transitions(3)}
        assert pairs == {(2, 1), (3, 2), (1, 2), (2, 3)}

    def test_backward_edges_come_first(self):
        pairs = [(t.source, t.target) for t in build_transitions(4)]
        assert pairs == [(2, 1), (3, 2), (4, 3), (1, 2), (2, 3), (3, 4)]

    def test_no_duplicates(self):
        transitions = build_transitions(6)
        assert len(set(transitions)) == len(transitions)

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            build_transitions(-1)

    @pytest.mark.parametrize("n", [2.0, "3", None, True])
    def test_non_int_rejected(self, n):
        with pytest.raises(TypeError):
            build_transitions(n)


class TestTransition:

    def test_control_names(self):
        assert Transition.forward(1).control_name == "go_1_2"
        assert Transition.backward(3).control_name == "go_3_2"
        assert Transition(2, 3).control_id("whiz") == "whiz/go_2_3"

    def test_direction(self):
        assert Transition.forward(2).direction == "next"
        assert Transition.backward(2).direction == "prev"

    def test_non_adjacent_rejected(self):
        with pytest.raises(ValueError):
            Transition(1, 3)
        with pytest.raises(ValueError):
            Transition(2, 2)

    def test_zero_index_rejected(self):
        with pytest.raises(ValueError):
            Transition.backward(1)


class TestPageRegistry:
    """Pages and the controls attached to them"""

    def test_titles_are_one_based(self):
        registry = PageRegistry(["a", "b"])
        assert [page.title for page in registry] == ["page_1", "page_2"]
        assert registry.page(2).content == "b"

    def test_three_page_slots(self):
        slots = PageRegistry(["a", "b", "c"], done="DONE").slots()

        first, middle, last = slots
        assert first.previous is None
        assert first.next == Transition(1, 2)
        assert first.done is None

        assert middle.previous == Transition(2, 1)
        assert middle.next == Transition(2, 3)
        assert middle.done is None

        assert last.previous == Transition(3, 2)
        assert last.next is None
        assert last.done == "DONE"

    def test_single_page_gets_done_control(self):
        (slot,) = PageRegistry(["only"], done="DONE").slots()
        assert slot.previous is None
        assert slot.next is None
        assert slot.done == "DONE"

    def test_no_pages(self):
        registry = PageRegistry([], done="DONE")
        assert len(registry) == 0
        assert registry.slots() == []

    def test_tuple_pages_accepted(self):
        assert len(PageRegistry(("a", "b"))) == 2

    @pytest.mark.parametrize("pages", ["abc", {"a": 1}, 3, None, {"a", "b"}])
    def test_non_sequence_rejected(self, pages):
        with pytest.raises(TypeError):
            PageRegistry(pages)

    def test_page_out_of_range(self):
        registry = PageRegistry(["a"])
        with pytest.raises(IndexError):
            registry.page(0)
        with pytest.raises(IndexError):
            registry.page(2)

    def test_slot_transitions_match_graph(self):
        """Controls rendered on pages are exactly the dispatcher's transitions"""
        slots = PageRegistry(list("abcde")).slots()
        rendered = {t for s in slots for t in (s.previous, s.next) if t is not None}
        assert rendered == set(build_transitions(5))


class TestSelectorCell:

    def test_starts_on_first_page(self):
        for n in (1, 2, 7):
            assert SelectorCell(n).get() == 1

    def test_rejects_out_of_range(self):
        cell = SelectorCell(3)
        with pytest.raises(ValueError):
            cell.set(0)
        with pytest.raises(ValueError):
            cell.set(4)
        assert cell.value == 1

    def test_empty_flow(self):
        assert SelectorCell(0).get() == 0


class TestTransitionDispatcher:
    """Listener per control writing the current page"""

    @pytest.fixture
    def dispatcher(self):
        return TransitionDispatcher("whiz", 3)

    def test_one_listener_per_transition(self, dispatcher):
        assert dispatcher.control_ids() == [
            "whiz/go_2_1",
            "whiz/go_3_2",
            "whiz/go_1_2",
            "whiz/go_2_3",
        ]
        assert dispatcher.selector_id == "whiz/wizard"

    def test_forward_and_backward(self, dispatcher):
        selector = dispatcher.new_selector()
        assert selector.get() == 1

        assert dispatcher.activate("whiz/go_1_2", selector) == 2
        assert dispatcher.activate("whiz/go_2_3", selector) == 3
        assert dispatcher.activate("whiz/go_3_2", selector) == 2
        assert dispatcher.activate("whiz/go_2_1", selector) == 1
        assert selector.get() == 1

    def test_each_listener_has_its_own_target(self, dispatcher):
        """No listener closes over another listener's pair"""
        for control_id in dispatcher.control_ids():
            transition = dispatcher.transition_for(control_id)
            selector = SelectorCell(3, initial=transition.source)
            dispatcher.activate(control_id, selector)
            assert selector.get() == transition.target

    def test_writes_regardless_of_current_page(self, dispatcher):
        selector = SelectorCell(3, initial=3)
        dispatcher.activate("whiz/go_1_2", selector)
        assert selector.get() == 2

    def test_activation_is_idempotent(self, dispatcher):
        once = dispatcher.new_selector()
        dispatcher.activate("whiz/go_1_2", once)

        twice = dispatcher.new_selector()
        dispatcher.activate("whiz/go_1_2", twice)
        dispatcher.activate("whiz/go_1_2", twice)

        assert once.get() == twice.get() == 2

    def test_guarded_ignores_other_pages(self):
        dispatcher = TransitionDispatcher("guarded", 3, guarded=True)
        selector = SelectorCell(3, initial=3)

        assert dispatcher.activate("guarded/go_1_2", selector) == 3
        assert selector.get() == 3

        assert dispatcher.activate("guarded/go_3_2", selector) == 2
        assert selector.get() == 2

    def test_unknown_control(self, dispatcher):
        with pytest.raises(KeyError):
            dispatcher.activate("whiz/go_3_4", dispatcher.new_selector())
        with pytest.raises(KeyError):
            dispatcher.activate("other/go_1_2", dispatcher.new_selector())

    def test_single_page_has_no_controls(self):
        dispatcher = TransitionDispatcher("solo", 1)
        assert dispatcher.control_ids() == []
        assert dispatcher.new_selector().get() == 1

    def test_distinct_roots_never_collide(self):
        a = TransitionDispatcher("a", 4)
        b = TransitionDispatcher("b", 4)
        nested = TransitionDispatcher("a/b", 4)

        ids = [set(d.control_ids()) | {d.selector_id} for d in (a, b, nested)]
        assert not ids[0] & ids[1]
        assert not ids[0] & ids[2]
        assert not ids[1] & ids[2]

    def test_independent_selectors(self, dispatcher):
        first = dispatcher.new_selector()
        second = dispatcher.new_selector()
        dispatcher.activate("whiz/go_1_2", first)
        assert first.get() == 2
        assert second.get() == 1


class TestWizardServer:

    @pytest.fixture(autouse=True)
    def cleanup(self):
        yield
        unregister("test_server")

    def test_registers_dispatcher(self):
        dispatcher = wizard_server("test_server", 4)
        assert get_dispatcher("test_server") is dispatcher
        assert len(dispatcher.transitions) == 6

    def test_reregistering_replaces(self):
        wizard_server("test_server", 2)
        replacement = wizard_server("test_server", 5)
        assert get_dispatcher("test_server") is replacement

    def test_unknown_root(self):
        with pytest.raises(KeyError):
            get_dispatcher("never_registered")

    def test_unregister_forgets_root(self):
        from module_gallery import modules

        modules.wizard_server("test_server", 3)
        modules.unregister("test_server")
        with pytest.raises(KeyError):
            modules.get_dispatcher("test_server")
        modules.unregister("test_server")


def test_page_title_round_trip():
    assert page_title(4) == "page_4"
    assert page_index("page_4") == 4
    with pytest.raises(ValueError):
        page_index("wizard")
