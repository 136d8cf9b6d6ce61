from main import extract_markdown_text, extract_rtf_text


def test_markdown_keeps_paragraph_breaks():
    md = "# Market Update\n\nSome **bold** text with a [link](http://example.com).\n\n```\ncode\n```"
    assert extract_markdown_text(md) == "Market Update\n\nSome bold text with a link."


def test_rtf_paragraphs_become_blank_lines():
    rtf = r"{\rtf1\ansi First paragraph text.\par Second paragraph text.}"
    assert extract_rtf_text(rtf) == "First paragraph text.\n\nSecond paragraph text."


def test_import_leaves_logging_unconfigured(monkeypatch):
    import importlib
    import logging
    import main

    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda *a, **kw: calls.append((a, kw)))
    importlib.reload(main)
    assert calls == []
