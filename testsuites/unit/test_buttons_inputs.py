import pytest

from testsuites.unit.fakes import FakeNode
from ui_automation.elements import Button, Input, TextArea


@pytest.mark.asyncio
async def test_button_click_passes_options(browser, frame):
    node, = frame.add("#save", FakeNode("Save"))
    button = Button("#save", "Save Button")

    await button.click()
    await button.click(button="right")
    await button.double_click()

    assert node.clicks == [{}, {"button": "right"}]
    assert node.double_clicks == 1


@pytest.mark.asyncio
async def test_button_enabled_state(browser, frame):
    node, = frame.add("#submit", FakeNode(enabled=False))
    button = Button("#submit")

    assert await button.is_disabled() is True
    node.enabled = True
    assert await button.is_enabled() is True
    assert await button.wait_for_enabled(timeout=100) is True


@pytest.mark.asyncio
async def test_input_set_add_and_clear(browser, frame):
    node, = frame.add("#name", FakeNode(tag="input", value="old"))
    field = Input("#name", "Name Input")

    await field.set_value("Ann")
    assert await field.get_value() == "Ann"

    await field.add_value(" Lee")
    assert node.value == "Ann Lee"

    await field.clear()
    assert await field.get_value() == ""


@pytest.mark.asyncio
async def test_type_slowly_clears_first(browser, frame):
    node, = frame.add("#search", FakeNode(tag="input", value="stale"))
    field = Input("#search")

    await field.type_slowly("abc", delay=50)

    assert node.value == "abc"
    assert node.typed == [("abc", 50)]


@pytest.mark.asyncio
async def test_input_attributes(browser, frame):
    frame.add("#ro", FakeNode(tag="input", attributes={"readonly": "", "placeholder": "Email"}))
    frame.add("#rw", FakeNode(tag="input"))

    assert await Input("#ro").is_read_only() is True
    assert await Input("#ro").get_placeholder() == "Email"
    assert await Input("#rw").is_read_only() is False


@pytest.mark.asyncio
async def test_text_area_accessors(browser, frame):
    frame.add("textarea", FakeNode(tag="textarea", attributes={"rows": "4", "cols": "40", "maxlength": "200"}))
    notes = TextArea("textarea", "Notes")

    await notes.set_value("line one\nline two")

    assert await notes.get_character_count() == 17
    assert await notes.get_rows() == "4"
    assert await notes.get_cols() == "40"
    assert await notes.get_max_length() == "200"
