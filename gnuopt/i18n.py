"""Message lookup helpers with an untranslated fallback.

A translation catalog is any mapping. Singular lookups map a message id to
its translated text; plural lookups map the singular message id to either
one string or a sequence of forms (singular first, then plural). Messages
with a context are stored under :func:`context_key`. When no catalog is given,
or the message is missing from it, the original text is returned.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Union

CONTEXT_GLUE = "\x04"

Entry = Union[str, Sequence[str]]
Catalog = Optional[Mapping[str, Entry]]

__all__ = [
    "CONTEXT_GLUE",
    "gettext_noop",
    "context_key",
    "ngettext",
    "pgettext",
    "npgettext",
]


def gettext_noop(string: str) -> str:
    """Mark a string for extraction without translating it.

    Only string literals can be extracted, so anything else is rejected.
    """
    if not isinstance(string, str):
        raise TypeError(f"message must be a str, not {type(string).__name__}")
    return string


def context_key(msgctxt: str, msgid: str) -> str:
    """Return the catalog key for MSGID within context MSGCTXT."""
    return f"{msgctxt}{CONTEXT_GLUE}{msgid}"


def _plural_form(entry: Entry, n: int) -> str:
    if isinstance(entry, str):
        return entry
    forms = list(entry)
    if not forms:
        raise ValueError("plural entry has no forms")
    index = 0 if n == 1 else 1
    return forms[min(index, len(forms) - 1)]


def _lookup(translations: Catalog, key: str) -> Optional[Entry]:
    if translations is None:
        return None
    return translations.get(key)


def ngettext(msgid1: str, msgid2: str, n: int, translations: Catalog = None) -> str:
    """Return the translation of MSGID1 in the form that suits N."""
    entry = _lookup(translations, msgid1)
    if entry is None:
        return msgid1 if n == 1 else msgid2
    return _plural_form(entry, n)


def pgettext(msgctxt: str, msgid: str, translations: Catalog = None) -> str:
    """Return the translation of MSGID within context MSGCTXT, or MSGID."""
    entry = _lookup(translations, context_key(msgctxt, msgid))
    if entry is None:
        return msgid
    return _plural_form(entry, 1)


def npgettext(
    msgctxt: str,
    msgid: str,
    msgid_plural: str,
    n: int,
    translations: Catalog = None,
) -> str:
    """Return the plural-aware translation of MSGID within context MSGCTXT."""
    entry = _lookup(translations, context_key(msgctxt, msgid))
    if entry is None:
        return msgid if n == 1 else msgid_plural
    return _plural_form(entry, n)