"""DocumentRenderer protocol: stable interface for block renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.
The built-in ``MarkdownRenderer`` is the reference implementation.

Example:
    from codewalk.renderers.protocol import DocumentRenderer

    def write_page(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from codewalk.nodes import Document


@runtime_checkable
class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, doc: Document) -> str:
        """Render a composed Document to a string."""
        ...
