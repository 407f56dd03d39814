import pytest

from testsuites.unit.fakes import FakeConsoleMessage, FakeDialog, FakeFrame, FakePage
from ui_automation.browser import Browser, DEFAULT_WINDOW_SIZE, SCROLL_TO_SCRIPT
from ui_automation.exceptions import ElementNotFoundError, WaitTimeoutError
from ui_automation.waits import WaitOptions


def test_browser_is_a_singleton(browser):
    assert Browser() is browser
    Browser.reset()
    assert Browser() is not browser


def test_unattached_browser_refuses_page_access():
    browser = Browser()
    assert browser.is_attached is False
    with pytest.raises(RuntimeError, match="Browser not started"):
        _ = browser.page


@pytest.mark.asyncio
async def test_navigate_resolves_against_base_url(browser, page, monkeypatch):
    monkeypatch.setenv("BASE_URL", "https://example.test/")

    await browser.navigate_to("/login")
    await browser.navigate_to("https://other.test/page")

    assert page.visited == ["https://example.test/login", "https://other.test/page"]
    assert await browser.get_url() == "https://other.test/page"
    assert await browser.get_title() == "The Internet"


@pytest.mark.asyncio
async def test_navigation_resets_frame(browser, page, frame):
    frame.add_child(FakeFrame(name="inner"))
    browser.switch_to_frame("inner")

    await browser.refresh()
    assert browser.current_frame is frame

    browser.switch_to_frame(0)
    await browser.back()
    await browser.forward()
    assert browser.current_frame is frame
    assert page.history_moves == ["reload", "back", "forward"]


@pytest.mark.asyncio
async def test_window_size(browser, page):
    await browser.set_window_size(800, 600)
    assert await browser.get_window_size() == {"width": 800, "height": 600}

    await browser.maximize_window()
    assert await browser.get_window_size() == DEFAULT_WINDOW_SIZE


@pytest.mark.asyncio
async def test_new_window_switch_and_close(browser, page):
    original = await browser.get_current_window_handle()

    handle = await browser.new_window()
    assert handle != original
    assert await browser.get_current_window_handle() == handle
    assert await browser.get_window_handles() == [original, handle]

    await browser.switch_to_window(original)
    assert browser.page is page
    assert page.brought_to_front is True

    await browser.switch_to_window(handle)
    await browser.close_window()
    assert browser.page is page
    assert await browser.get_window_handles() == [original]


@pytest.mark.asyncio
async def test_switch_to_unknown_window_raises(browser):
    with pytest.raises(ElementNotFoundError, match="window-99"):
        await browser.switch_to_window("window-99")


@pytest.mark.asyncio
async def test_closing_last_window_detaches(browser):
    await browser.close_window()
    assert browser.is_attached is False


def test_frame_switching(browser, page, frame):
    first = frame.add_child(FakeFrame(name="left"))
    nested = first.add_child(FakeFrame(name="middle"))

    browser.switch_to_frame(0)
    assert browser.current_frame is first
    browser.switch_to_frame("middle")
    assert browser.current_frame is nested
    browser.switch_to_parent_frame()
    assert browser.current_frame is first
    browser.switch_to_frame(None)
    assert browser.current_frame is frame

    with pytest.raises(ElementNotFoundError):
        browser.switch_to_frame("missing")
    with pytest.raises(ElementNotFoundError):
        browser.switch_to_frame(3)


@pytest.mark.asyncio
async def test_dialogs_are_dismissed_by_default(browser, page):
    dialog = FakeDialog("Leave page?", "confirm")
    await page.emit("dialog", dialog)

    assert dialog.accepted is False
    assert await browser.get_alert_text() == "Leave page?"


@pytest.mark.asyncio
async def test_armed_dialog_actions_apply_once(browser, page):
    await browser.accept_alert()
    accepted = FakeDialog("I am a JS Confirm", "confirm")
    await page.emit("dialog", accepted)

    await browser.send_alert_text("hello")
    prompted = FakeDialog("I am a JS prompt", "prompt")
    await page.emit("dialog", prompted)

    unarmed = FakeDialog("again")
    await page.emit("dialog", unarmed)

    assert accepted.accepted is True and accepted.prompt_text is None
    assert prompted.accepted is True and prompted.prompt_text == "hello"
    assert unarmed.accepted is False


@pytest.mark.asyncio
async def test_alert_text_before_any_dialog_raises(browser):
    with pytest.raises(ElementNotFoundError):
        await browser.get_alert_text()


@pytest.mark.asyncio
async def test_cookies(browser, page):
    await browser.set_cookie({"name": "session", "value": "abc"})
    await browser.set_cookie({"name": "pref", "value": "dark", "domain": "example.test", "path": "/"})

    cookies = await browser.get_cookies()
    assert cookies[0] == {"name": "session", "value": "abc", "url": page.url}
    assert "url" not in cookies[1]

    await browser.delete_all_cookies()
    assert await browser.get_cookies() == []


@pytest.mark.asyncio
async def test_queries_log_before_touching_the_page(browser, page, log_messages, monkeypatch):
    seen_at_call = []
    original_cookies = page.context.cookies

    async def cookies():
        seen_at_call.append(list(log_messages))
        return await original_cookies()

    monkeypatch.setattr(page.context, "cookies", cookies)

    await browser.get_cookies()
    assert "Getting cookies" in seen_at_call[0]

    await browser.get_current_window_handle()
    await browser.get_window_handles()
    assert "Getting current window handle" in log_messages
    assert log_messages.index("Getting window handles") < log_messages.index("Total windows: 1")


@pytest.mark.asyncio
async def test_execute_passes_arguments(browser, frame):
    frame.scripts["() => document.title"] = "The Internet"
    frame.scripts["(n) => n * 2"] = lambda n: n * 2

    assert await browser.execute("() => document.title") == "The Internet"
    assert await browser.execute("(n) => n * 2", 21) == 42
    await browser.execute("([a, b]) => a + b", 1, 2)
    await browser.scroll(0, 500)

    assert frame.evaluated[-2] == ("([a, b]) => a + b", [1, 2])
    assert frame.evaluated[-1] == (SCROLL_TO_SCRIPT, [0, 500])


@pytest.mark.asyncio
async def test_execute_runs_in_current_frame(browser, frame):
    inner = frame.add_child(FakeFrame(name="inner"))
    browser.switch_to_frame("inner")

    await browser.execute("() => 1")

    assert inner.evaluated == [("() => 1", None)]
    assert frame.evaluated == []


@pytest.mark.asyncio
async def test_screenshot_written_to_report_path(browser, tmp_path, monkeypatch):
    monkeypatch.setenv("REPORT_PATH", str(tmp_path))

    default_path = await browser.take_screenshot(attach_to_allure=False)
    named_path = await browser.take_screenshot(str(tmp_path / "shots" / "login.png"), attach_to_allure=False)

    assert default_path.parent == tmp_path / "screenshots"
    assert default_path.name.startswith("screenshot-")
    assert default_path.exists()
    assert named_path.exists()


@pytest.mark.asyncio
async def test_console_logs(browser, page):
    await page.emit("console", FakeConsoleMessage("error", "Uncaught TypeError"))

    logs = await browser.get_logs()
    assert len(logs) == 1
    assert logs[0]["level"] == "error"
    assert logs[0]["message"] == "Uncaught TypeError"
    assert await browser.get_logs("performance") == []


def test_listeners_registered_once_per_page(browser, page):
    browser.attach(page)
    assert len(page.handlers["dialog"]) == 1
    assert len(page.handlers["console"]) == 1


@pytest.mark.asyncio
async def test_wait_until(browser):
    ticks = []
    assert await browser.wait_until(lambda: ticks.append(1) or len(ticks) > 1, WaitOptions(interval_ms=10))

    with pytest.raises(WaitTimeoutError, match="Condition was not met in time"):
        await browser.wait_until(lambda: False, WaitOptions(timeout_ms=50, interval_ms=10))

    options = WaitOptions(timeout_ms=50, interval_ms=10, raise_on_timeout=False)
    assert await browser.wait_until(lambda: False, options) is False
    assert options.timeout_message is None


@pytest.mark.asyncio
async def test_pause(browser):
    await browser.pause(1)


@pytest.mark.asyncio
async def test_second_page_keeps_its_own_context(browser, page):
    other = FakePage()
    browser.attach(other)
    assert await browser.get_window_handles() == [await browser.get_current_window_handle()]
