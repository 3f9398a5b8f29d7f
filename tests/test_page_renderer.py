from models.search import GeneratedPage
from utils.page_renderer import body_content, compose_document


def test_compose_document_inlines_css_and_body():
    page = GeneratedPage(
        html="<!DOCTYPE html><html><head><title>x</title></head><body class='main'><h1>Hi</h1></body></html>",
        css="h1 { color: red; }",
        title="Tips & Tricks",
        url="https://tips.example",
    )

    document = compose_document(page)

    assert "<title>Tips &amp; Tricks</title>" in document
    assert "h1 { color: red; }" in document
    assert "<h1>Hi</h1>" in document
    assert document.count("<body>") == 1
    assert "pointer-events: none" in document


def test_body_content_without_skeleton_is_unchanged():
    assert body_content("<p>fragment</p>") == "<p>fragment</p>"
