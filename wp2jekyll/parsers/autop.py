"""
WordPress-style automatic paragraphs.

WordPress stores post bodies as loosely formatted text and only adds
``<p>`` and ``<br />`` tags when rendering.  Jekyll will not do that for an
``.html`` document, so :func:`wpautop` reproduces the transformation when
the document is written: blank-line separated blocks become paragraphs,
remaining single newlines become line breaks, block-level elements are left
unwrapped and ``<pre>`` sections are copied verbatim.
"""

from __future__ import annotations

import re
from typing import Dict

ALLBLOCKS = (
    r"(?:table|thead|tfoot|caption|col|colgroup|tbody|tr|td|th|div|dl|dd|dt|"
    r"ul|ol|li|pre|select|option|form|map|area|blockquote|address|math|style|"
    r"p|h[1-6]|hr|fieldset|noscript|legend|section|article|aside|hgroup|"
    r"header|footer|nav|figure|figcaption|details|menu|summary)"
)

_OPEN_BLOCK = re.compile(r"(<" + ALLBLOCKS + r"(?=[\s/>])[^>]*>)")
_CLOSE_BLOCK = re.compile(r"(</" + ALLBLOCKS + r">)")
_ANY_BLOCK = r"(</?" + ALLBLOCKS + r"(?=[\s/>])[^>]*>)"
_PRE = re.compile(r"<pre[\s>].*?</pre>", re.DOTALL | re.IGNORECASE)
_NEWLINE_KEEPER = "<WPPreserveNewline />"


def _stash_pre(text: str, stash: Dict[str, str]) -> str:
    def repl(match: re.Match) -> str:
        key = f"<pre wp-pre-tag-{len(stash)}></pre>"
        stash[key] = match.group(0)
        return key

    return _PRE.sub(repl, text)


def wpautop(text: str, br: bool = True) -> str:
    if not text or not text.strip():
        return ""

    pre_tags: Dict[str, str] = {}
    pee = _stash_pre(text + "\n", pre_tags)

    pee = re.sub(r"<br />\s*<br />", "\n\n", pee)
    pee = _OPEN_BLOCK.sub(r"\n\1", pee)
    pee = _CLOSE_BLOCK.sub(r"\1\n\n", pee)
    pee = pee.replace("\r\n", "\n").replace("\r", "\n")
    if "<object" in pee:
        pee = re.sub(r"\s*<param([^>]*)>\s*", r"<param\1>", pee)
        pee = re.sub(r"\s*</embed>\s*", "</embed>", pee)
    pee = re.sub(r"\n\n+", "\n\n", pee)

    blocks = [b for b in re.split(r"\n\s*\n", pee) if b]
    pee = "".join("<p>" + b.strip("\n") + "</p>\n" for b in blocks)

    pee = re.sub(r"<p>\s*</p>", "", pee)
    pee = re.sub(r"<p>([^<]+)</(div|address|form)>", r"<p>\1</p></\2>", pee)
    pee = re.sub(r"<p>\s*" + _ANY_BLOCK + r"\s*</p>", r"\1", pee)
    pee = re.sub(r"<p>(<li.+?)</p>", r"\1", pee)
    pee = re.sub(r"<p><blockquote([^>]*)>", r"<blockquote\1><p>", pee, flags=re.IGNORECASE)
    pee = pee.replace("</blockquote></p>", "</p></blockquote>")
    pee = re.sub(r"<p>\s*" + _ANY_BLOCK, r"\1", pee)
    pee = re.sub(_ANY_BLOCK + r"\s*</p>", r"\1", pee)

    if br:
        pee = re.sub(
            r"<(script|style).*?</\1>",
            lambda m: m.group(0).replace("\n", _NEWLINE_KEEPER),
            pee,
            flags=re.DOTALL,
        )
        pee = re.sub(r"(?<!<br />)\s*\n", "<br />\n", pee)
        pee = pee.replace(_NEWLINE_KEEPER, "\n")

    pee = re.sub(_ANY_BLOCK + r"\s*<br />", r"\1", pee)
    pee = re.sub(r"<br />(\s*</?(?:p|li|div|dl|dd|dt|th|pre|td|ul|ol)[^>]*>)", r"\1", pee)
    pee = re.sub(r"\n</p>$", "</p>", pee)

    for key, value in pre_tags.items():
        pee = pee.replace(key, value)
    return pee
