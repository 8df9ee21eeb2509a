"""Documentation comment formatting."""

from tsdoc_render.printer.signature import indent


def split_paragraphs(js_doc: str) -> list[str]:
    """Split a comment on blank lines, reflowing each paragraph to one line."""
    return [paragraph.replace("\n", " ") for paragraph in js_doc.split("\n\n")]


def format_js_doc(js_doc: str, truncated: bool, depth: int) -> list[str]:
    """Format a comment documenting a signature at ``depth``.

    Lines are indented one level deeper than the signature. When
    ``truncated`` is set only the first paragraph is kept, so an empty
    comment still yields one (blank) line.
    """
    paragraphs = split_paragraphs(js_doc)
    if truncated:
        paragraphs = paragraphs[:1]
    prefix = indent(depth + 1)
    return [prefix + paragraph for paragraph in paragraphs]
