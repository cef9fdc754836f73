"""
Wizard module - paged flow controller

A wizard breaks a long form into pages the user walks through one at a time.
The caller supplies the page contents; this module works out the navigation:

- PageRegistry: ordered pages plus which controls each page carries
- build_transitions(): every prev/next edge for a flow of n pages
- TransitionDispatcher: one listener per control, each writing the target
  page into the current-page selector

Nothing here depends on Reflex. The Reflex state keeps the selector value per
session and hands it to the dispatcher through the Selector protocol.
"""
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from module_gallery.utils.namespace import ns

logger = logging.getLogger(__name__)

SELECTOR_NAME = "wizard"


def page_title(index: int) -> str:
    return f"page_{index}"


def page_index(title: str) -> int:
    """Inverse of page_title()."""
    prefix, _, number = title.partition("_")
    if prefix != "page" or not number.isdigit():
        raise ValueError(f"not a page title: {title!r}")
    return int(number)


@dataclass(frozen=True)
class Page:
    index: int
    content: Any

    @property
    def title(self) -> str:
        return page_title(self.index)


@dataclass(frozen=True)
class Transition:
    """Edge between two adjacent pages, fired by a single control."""

    source: int
    target: int

    def __post_init__(self):
        if abs(self.source - self.target) != 1:
            raise ValueError(f"pages {self.source} and {self.target} are not adjacent")
        if min(self.source, self.target) < 1:
            raise ValueError(f"page indices start at 1, got {self.source}->{self.target}")

    @classmethod
    def forward(cls, index: int) -> "Transition":
        return cls(index, index + 1)

    @classmethod
    def backward(cls, index: int) -> "Transition":
        return cls(index, index - 1)

    @property
    def direction(self) -> str:
        return "next" if self.target > self.source else "prev"

    @property
    def control_name(self) -> str:
        return f"go_{self.source}_{self.target}"

    def control_id(self, root: str) -> str:
        return ns(root, self.control_name)


def build_transitions(n: int) -> Tuple[Transition, ...]:
    """
    All valid transitions for a flow of n pages.

    Backward edges for pages 2..n come first, then forward edges for pages
    1..n-1, giving max(0, 2n - 2) transitions.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"page count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"page count must be >= 0, got {n}")

    backward = tuple(map(Transition.backward, range(2, n + 1)))
    forward = tuple(map(Transition.forward, range(1, n)))
    return backward + forward


@dataclass(frozen=True)
class PageSlot:
    """A page together with the controls rendered alongside it."""

    page: Page
    previous: Optional[Transition] = None
    next: Optional[Transition] = None
    done: Any = None


class PageRegistry:
    """Ordered, immutable collection of the pages of one flow."""

    def __init__(self, pages: Sequence, done: Any = None):
        if isinstance(pages, (str, bytes, Mapping)) or not isinstance(pages, Sequence):
            raise TypeError(f"pages must be a list or tuple, got {type(pages).__name__}")

        self._pages = tuple(Page(i, content) for i, content in enumerate(pages, start=1))
        self.done = done

        if not self._pages and done is not None:
            logger.warning("Wizard has no pages; the done control will not be rendered")

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self):
        return iter(self._pages)

    def page(self, index: int) -> Page:
        if not 1 <= index <= len(self._pages):
            raise IndexError(f"page {index} out of range 1..{len(self._pages)}")
        return self._pages[index - 1]

    def slots(self) -> List[PageSlot]:
        n = len(self._pages)
        return [
            PageSlot(
                page=page,
                previous=Transition.backward(page.index) if page.index > 1 else None,
                next=Transition.forward(page.index) if page.index < n else None,
                done=self.done if page.index == n else None,
            )
            for page in self._pages
        ]


class Selector(Protocol):
    """Read/write access to the current page of one flow."""

    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class SelectorCell:
    """In-process current-page selector for a flow of n pages."""

    def __init__(self, n: int, initial: int = 1):
        self.n = n
        self._value = 0
        if n >= 1:
            self.set(initial)

    def get(self) -> int:
        return self._value

    @property
    def value(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        if not 1 <= value <= self.n:
            raise ValueError(f"page {value} out of range 1..{self.n}")
        self._value = value

    def __repr__(self):
        return f"<SelectorCell({self._value}/{self.n})>"


Listener = Callable[[Selector], int]


class TransitionDispatcher:
    """
    Binds every transition control of a flow to a selector write.

    Listeners are registered once, in build_transitions() order. Each one is a
    partial over its own Transition, so no two listeners share state.

    With guarded=True a listener only fires while its source page is current;
    use that when no rendering layer hides controls of other pages.
    """

    def __init__(self, root: str, n: int, guarded: bool = False):
        self.root = root
        self.n = n
        self.guarded = guarded
        self.selector_id = ns(root, SELECTOR_NAME)
        self.transitions = build_transitions(n)
        self._listeners: Dict[str, Listener] = {}
        for transition in self.transitions:
            self._listeners[transition.control_id(root)] = partial(self._change_page, transition)

    def _change_page(self, transition: Transition, selector: Selector) -> int:
        if self.guarded and selector.get() != transition.source:
            logger.debug(
                f"{self.root}: ignoring {transition.control_name}, "
                f"current page is {selector.get()}"
            )
            return selector.get()
        selector.set(transition.target)
        return transition.target

    def control_ids(self) -> List[str]:
        return list(self._listeners)

    def transition_for(self, control_id: str) -> Transition:
        return self._listeners[control_id].args[0]

    def activate(self, control_id: str, selector: Selector) -> int:
        """Run the listener bound to control_id and return the resulting page."""
        try:
            listener = self._listeners[control_id]
        except KeyError:
            raise KeyError(f"{control_id!r} is not a control of wizard {self.root!r}") from None
        return listener(selector)

    def new_selector(self) -> SelectorCell:
        return SelectorCell(self.n)

    def __repr__(self):
        return f"<TransitionDispatcher({self.root!r}, n={self.n}, guarded={self.guarded})>"


_dispatchers: Dict[str, TransitionDispatcher] = {}


def wizard_server(root: str, n: int, guarded: bool = False) -> TransitionDispatcher:
    """Create the dispatcher for the wizard rendered under `root` and register it."""
    dispatcher = TransitionDispatcher(root, n, guarded=guarded)
    previous = _dispatchers.get(root)
    if previous is not None:
        logger.warning(f"Wizard {root!r} registered again (n={previous.n} -> n={n})")
    _dispatchers[root] = dispatcher
    logger.info(f"Wizard {root!r}: {n} pages, {len(dispatcher.transitions)} transitions")
    return dispatcher


def get_dispatcher(root: str) -> TransitionDispatcher:
    try:
        return _dispatchers[root]
    except KeyError:
        raise KeyError(f"no wizard registered under {root!r}") from None


def unregister(root: str) -> None:
    """Forget the wizard registered under `root`, if any."""
    _dispatchers.pop(root, None)
