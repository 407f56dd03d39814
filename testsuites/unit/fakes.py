"""
In-memory stand-ins for the parts of ``playwright.async_api`` the framework
touches (Page, Frame, Locator, BrowserContext, Dialog, ConsoleMessage).

A FakeFrame maps selectors to live lists of FakeNode objects. Locators read
those lists lazily, so nodes appended by an ``on_click`` callback are seen by
the next query, the same way a real DOM mutation would be.
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError


class FakeNode:
    """One DOM element."""

    def __init__(
        self,
        text: str = "",
        *,
        tag: str = "div",
        attributes: Optional[Dict[str, str]] = None,
        visible: bool = True,
        enabled: bool = True,
        checked: bool = False,
        value: str = "",
        children: Optional[Dict[str, List["FakeNode"]]] = None,
        on_click: Optional[Callable[["FakeNode"], None]] = None,
        scripts: Optional[Dict[str, Any]] = None,
        content_frame: Optional["FakeFrame"] = None,
    ):
        self.text = text
        self.tag = tag
        self.attributes = attributes or {}
        self.visible = visible
        self.enabled = enabled
        self.checked = checked
        self.value = value
        self.children = children or {}
        self.on_click = on_click
        self.scripts = scripts or {}
        self.content_frame = content_frame

        self.clicks: List[Dict[str, Any]] = []
        self.double_clicks = 0
        self.hovered = False
        self.scrolled = False
        self.probe_timeouts: List[Optional[float]] = []
        self.files: List[str] = []
        self.typed: List[tuple] = []

    def find(self, selector: str) -> List["FakeNode"]:
        if selector.endswith(":checked"):
            return [node for node in self.children.get(selector[: -len(":checked")], []) if node.checked]
        return self.children.get(selector, [])


class FakeElementHandle:
    def __init__(self, node: FakeNode):
        self._node = node

    async def content_frame(self) -> Optional["FakeFrame"]:
        return self._node.content_frame


class FakeLocator:
    """Lazily evaluated view over a list of nodes."""

    def __init__(self, source: Callable[[], List[FakeNode]]):
        self._source = source

    @property
    def nodes(self) -> List[FakeNode]:
        return list(self._source())

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(lambda: self.nodes[:1])

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(lambda: self.nodes[index:index + 1])

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(lambda: [child for node in self.nodes[:1] for child in node.find(selector)])

    def _node(self) -> FakeNode:
        nodes = self.nodes
        if not nodes:
            raise PlaywrightError("Timeout exceeded: element not found")
        return nodes[0]

    async def count(self) -> int:
        return len(self.nodes)

    async def all(self) -> List["FakeLocator"]:
        return [self.nth(i) for i in range(len(self.nodes))]

    async def is_visible(self) -> bool:
        nodes = self.nodes
        return bool(nodes) and nodes[0].visible

    async def is_enabled(self, timeout: Optional[float] = None) -> bool:
        node = self._node()
        node.probe_timeouts.append(timeout)
        return node.enabled

    async def is_checked(self, timeout: Optional[float] = None) -> bool:
        return self._node().checked

    async def inner_text(self, timeout: Optional[float] = None) -> str:
        return self._node().text

    async def get_attribute(self, name: str, timeout: Optional[float] = None) -> Optional[str]:
        return self._node().attributes.get(name)

    async def input_value(self, timeout: Optional[float] = None) -> str:
        return self._node().value

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        node = self._node()
        if expression not in node.scripts:
            raise PlaywrightError(f"Unexpected script: {expression}")
        result = node.scripts[expression]
        return result(arg) if callable(result) else result

    async def click(self, **options: Any) -> None:
        node = self._node()
        node.clicks.append(options)
        if node.on_click:
            node.on_click(node)

    async def dblclick(self, **options: Any) -> None:
        self._node().double_clicks += 1

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._node().value = value

    async def clear(self, timeout: Optional[float] = None) -> None:
        self._node().value = ""

    async def press_sequentially(self, text: str, delay: Optional[float] = None) -> None:
        node = self._node()
        node.typed.append((text, delay))
        node.value += text

    async def select_option(
        self,
        value: Optional[str] = None,
        index: Optional[int] = None,
        label: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> List[str]:
        options = self._node().children.get("option", [])
        matches = [
            position for position, option in enumerate(options)
            if (label is not None and option.text == label)
            or (value is not None and option.attributes.get("value") == value)
            or (index is not None and position == index)
        ]
        if not matches:
            raise PlaywrightError("Timeout exceeded: did not find some options")
        for position, option in enumerate(options):
            option.checked = position == matches[0]
        selected = options[matches[0]]
        self._node().value = selected.attributes.get("value", selected.text)
        return [self._node().value]

    async def scroll_into_view_if_needed(self, timeout: Optional[float] = None) -> None:
        self._node().scrolled = True

    async def hover(self, timeout: Optional[float] = None) -> None:
        self._node().hovered = True

    async def set_input_files(self, files: Any, timeout: Optional[float] = None) -> None:
        node = self._node()
        node.files = list(files) if isinstance(files, list) else [files]
        node.value = f"C:\\fakepath\\{Path(node.files[0]).name}" if node.files else ""

    async def element_handle(self, timeout: Optional[float] = None) -> FakeElementHandle:
        return FakeElementHandle(self._node())


class FakeFrame:
    """A document: selector -> live node list, plus child frames."""

    def __init__(self, name: str = "", title: str = "", url: str = "about:blank"):
        self.name = name
        self._title = title
        self.url = url
        self.parent_frame: Optional[FakeFrame] = None
        self.child_frames: List[FakeFrame] = []
        self.elements: Dict[str, List[FakeNode]] = {}
        self.scripts: Dict[str, Any] = {}
        self.evaluated: List[tuple] = []

    def add(self, selector: str, *nodes: FakeNode) -> List[FakeNode]:
        bucket = self.elements.setdefault(selector, [])
        bucket.extend(nodes)
        return bucket

    def add_child(self, frame: "FakeFrame") -> "FakeFrame":
        frame.parent_frame = self
        self.child_frames.append(frame)
        return frame

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(lambda: self.elements.get(selector, []))

    async def title(self) -> str:
        return self._title

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        self.evaluated.append((expression, arg))
        result = self.scripts.get(expression)
        return result(arg) if callable(result) else result


class FakeDialog:
    def __init__(self, message: str, dialog_type: str = "alert"):
        self.message = message
        self.type = dialog_type
        self.accepted: Optional[bool] = None
        self.prompt_text: Optional[str] = None

    async def accept(self, prompt_text: Optional[str] = None) -> None:
        self.accepted = True
        self.prompt_text = prompt_text

    async def dismiss(self) -> None:
        self.accepted = False


class FakeConsoleMessage:
    def __init__(self, message_type: str, text: str):
        self.type = message_type
        self.text = text


class FakeContext:
    def __init__(self):
        self.pages: List[FakePage] = []
        self._cookies: List[Dict[str, Any]] = []

    async def new_page(self) -> "FakePage":
        return FakePage(self)

    async def cookies(self) -> List[Dict[str, Any]]:
        return list(self._cookies)

    async def add_cookies(self, cookies: List[Dict[str, Any]]) -> None:
        self._cookies.extend(cookies)

    async def clear_cookies(self) -> None:
        self._cookies.clear()


class FakePage:
    def __init__(self, context: Optional[FakeContext] = None, title: str = "", url: str = "about:blank"):
        self.context = context or FakeContext()
        self.context.pages.append(self)
        self.main_frame = FakeFrame(title=title, url=url)
        self.handlers: Dict[str, List[Callable]] = defaultdict(list)
        self.viewport_size: Optional[Dict[str, int]] = {"width": 1280, "height": 720}
        self.visited: List[str] = []
        self.history_moves: List[str] = []
        self.closed = False
        self.brought_to_front = False

    @property
    def url(self) -> str:
        return self.main_frame.url

    def on(self, event: str, handler: Callable) -> None:
        self.handlers[event].append(handler)

    async def emit(self, event: str, payload: Any) -> None:
        for handler in self.handlers[event]:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result

    def frame(self, name: Optional[str] = None) -> Optional[FakeFrame]:
        pending = [self.main_frame]
        while pending:
            frame = pending.pop()
            if frame.name == name:
                return frame
            pending.extend(frame.child_frames)
        return None

    async def goto(self, url: str, **options: Any) -> None:
        self.visited.append(url)
        self.main_frame.url = url

    async def title(self) -> str:
        return await self.main_frame.title()

    async def reload(self, **options: Any) -> None:
        self.history_moves.append("reload")

    async def go_back(self, **options: Any) -> None:
        self.history_moves.append("back")

    async def go_forward(self, **options: Any) -> None:
        self.history_moves.append("forward")

    async def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.viewport_size = size

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG\r\n\x1a\nfake"
        if path:
            Path(path).write_bytes(data)
        return data

    async def bring_to_front(self) -> None:
        self.brought_to_front = True

    async def close(self) -> None:
        self.closed = True
        self.context.pages.remove(self)
