import html
import re

from passgen.models.generation import GenerationRequest
from passgen.services.render_service import render_form

TEXTAREA = re.compile(r'<textarea id="passwords-container" readonly>(.*?)</textarea>', re.S)


def _entries(page):
    m = TEXTAREA.search(page)
    assert m is not None
    return html.unescape(m.group(1)).split("\n")


def test_empty_form_has_no_password_block():
    page = render_form()
    assert 'id="passwords-container"' not in page
    assert 'class="password-list"' not in page
    assert 'onclick="copyToClipboard()"' not in page
    assert '<option value="numbers-mixed" selected>' in page
    assert '<option value="false" selected>' in page
    assert 'value="5"' in page
    assert 'value="32"' in page


def test_batch_is_rendered_one_per_line():
    passwords = ["a<b&c>d", "plain", "x\"y'z"]
    page = render_form(passwords, GenerationRequest(count=3, length=7))
    assert _entries(page) == passwords
    assert 'onclick="copyToClipboard()"' in page


def test_submitted_values_are_echoed():
    req = GenerationRequest(count=12, length=9, category="uppercase", include_special=True)
    page = render_form(["ABCDEFGHI"], req)
    assert 'value="12"' in page
    assert 'value="9"' in page
    assert '<option value="uppercase" selected>' in page
    assert '<option value="numbers-mixed" selected>' not in page
    assert '<option value="true" selected>' in page


def test_unknown_category_selects_nothing():
    page = render_form(["x"], GenerationRequest(category="bogus"))
    m = re.search(r'<select id="category" name="category">(.*?)</select>', page, re.S)
    assert m is not None
    assert "selected" not in m.group(1)
