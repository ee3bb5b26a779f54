"""A small streaming XML writer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from xml.sax.saxutils import escape

Attrs = Iterable[tuple[str, str]]


class XmlWriter:
    """Writes an XML document; elements left without content are self-closed."""

    def __init__(self) -> None:
        self._parts: list[str] = ['<?xml version="1.0" encoding="UTF-8"?>']
        self._start_pending = False

    def _flush_start(self) -> None:
        if self._start_pending:
            self._parts.append(">")
            self._start_pending = False

    def _open(self, name: str, attrs: Attrs) -> None:
        self._flush_start()
        rendered = "".join(
            f' {key}="{escape(value, {chr(34): "&quot;"})}"' for key, value in attrs
        )
        self._parts.append(f"<{name}{rendered}")
        self._start_pending = True

    def _close(self, name: str) -> None:
        if self._start_pending:
            self._parts.append(" />")
            self._start_pending = False
        else:
            self._parts.append(f"</{name}>")

    @contextmanager
    def elem(self, name: str, attrs: Attrs = ()) -> Iterator[XmlWriter]:
        """Open an element for the body of a with-block."""
        self._open(name, attrs)
        yield self
        self._close(name)

    def empty(self, name: str, attrs: Attrs = ()) -> None:
        """Write an element with attributes and no content."""
        self._open(name, attrs)
        self._close(name)

    def val(self, name: str, value: str) -> None:
        """Write an element holding only text."""
        self._open(name, ())
        self._flush_start()
        self._parts.append(escape(value))
        self._close(name)

    def getvalue(self) -> bytes:
        return "".join(self._parts).encode("utf-8")