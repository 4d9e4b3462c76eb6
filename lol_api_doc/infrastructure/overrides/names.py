"""Conversion of vendor field names into target identifiers."""

from __future__ import annotations

# Only entries that are highly unlikely to be non-initialisms belong here.
# "ID" is fine, "AND" is not.
COMMON_INITIALISMS = frozenset({
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP", "HTTPS",
    "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA", "SMTP", "SQL",
    "SSH", "TCP", "TLS", "TTL", "UDP", "UI", "UID", "UUID", "URI", "URL", "UTF8",
    "VM", "XML", "XSRF", "XSS",
})


def target_identifier(original: str) -> str:
    """Turn a field name such as ``championId`` into ``ChampionID``."""
    if not original:
        return ""
    return lint_name(original[0].upper() + original[1:])


def lint_name(name: str) -> str:
    """Normalize initialisms and underscores in a camel-case identifier.

    Words are split at lower-to-upper transitions and at underscores. A word
    that is a known initialism is written in capitals, or in lower case when it
    leads an identifier that starts lower case. Runs of underscores are
    dropped, except that one is kept between two digits.
    """
    if name == "_":
        return name
    if all(ch.islower() for ch in name):
        return name

    runes = list(name)
    w = i = 0  # start of the current word, scan position
    while i + 1 <= len(runes):
        eow = False
        if i + 1 == len(runes):
            eow = True
        elif runes[i + 1] == "_":
            eow = True
            n = 1
            while i + n + 1 < len(runes) and runes[i + n + 1] == "_":
                n += 1
            if i + n + 1 < len(runes) and runes[i].isdigit() and runes[i + n + 1].isdigit():
                n -= 1
            del runes[i + 1:i + 1 + n]
        elif runes[i].islower() and not runes[i + 1].islower():
            eow = True
        i += 1
        if not eow:
            continue

        word = "".join(runes[w:i])
        upper = word.upper()
        if upper in COMMON_INITIALISMS:
            if w == 0 and runes[w].islower():
                upper = upper.lower()
            runes[w:i] = list(upper)
        elif w > 0 and word.lower() == word:
            runes[w] = runes[w].upper()
        w = i
    return "".join(runes)
