"""
Text-entity normalization used when ``clean_entities`` is enabled.

WordPress content is frequently stored with raw non-ASCII characters that
older Jekyll/Liquid setups mangle.  When cleaning is enabled every non-ASCII
character that has a named HTML reference is written as that reference
(``é`` becomes ``&eacute;``).  The five reserved markup characters are left
untouched so that HTML embedded in the content keeps working, and ``/`` is
written as ``&#47;`` to avoid a known injection vector in the renderer.

The encoder is an injectable capability decided once at startup by
:func:`resolve_entity_encoder`.  When the requested encoder is unknown the
whole run falls back to :class:`PassthroughEncoder` and a single warning is
emitted.
"""

from __future__ import annotations

from html.entities import codepoint2name, html5
from typing import Callable, Dict, Optional, Protocol, Tuple


class EntityEncoder(Protocol):
    def normalize(self, text: str) -> str:
        ...


class PassthroughEncoder:
    """Encoder used when cleaning is disabled: returns text unchanged."""

    def normalize(self, text: str) -> str:
        return text or ""


class _TableEncoder:
    def __init__(self, names: Dict[int, str]) -> None:
        self._names = names

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        out = []
        for ch in text:
            code = ord(ch)
            if ch == "/":
                out.append("&#47;")
            elif code < 128:
                out.append(ch)
            else:
                name = self._names.get(code)
                out.append(f"&{name};" if name else ch)
        return "".join(out)


class NamedEntityEncoder(_TableEncoder):
    """HTML 4 named references (``&eacute;``, ``&hellip;``, ...)."""

    def __init__(self) -> None:
        super().__init__(dict(codepoint2name))


def _html5_names() -> Dict[int, str]:
    names: Dict[int, str] = {}
    # html5 maps "name;" -> character(s); keep single-codepoint entries and
    # prefer the HTML 4 spelling where one exists.
    for key in sorted(html5):
        value = html5[key]
        if not key.endswith(";") or len(value) != 1:
            continue
        names.setdefault(ord(value), key[:-1])
    names.update(codepoint2name)
    return names


class Html5EntityEncoder(_TableEncoder):
    """HTML 5 named references, a superset of :class:`NamedEntityEncoder`."""

    def __init__(self) -> None:
        super().__init__(_html5_names())


ENCODERS: Dict[str, Callable[[], EntityEncoder]] = {
    "named": NamedEntityEncoder,
    "html5": Html5EntityEncoder,
}


def resolve_entity_encoder(
    enabled: bool,
    name: str = "named",
    *,
    warn: Optional[Callable[[str], None]] = None,
) -> Tuple[EntityEncoder, bool]:
    """
    Pick the encoder for a run.

    Returns the encoder together with the effective ``clean_entities``
    flag.  An unknown encoder name disables cleaning for the whole run.
    """
    if not enabled:
        return PassthroughEncoder(), False
    factory = ENCODERS.get(name)
    if factory is None:
        if warn is not None:
            warn(
                f"Entity encoder '{name}' is not available, so the "
                "clean_entities option is now disabled."
            )
        return PassthroughEncoder(), False
    return factory(), True
