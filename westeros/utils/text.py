import re

# Characters that never belong in a slug
SLUG_STRIP_PATTERN = r"[^a-z0-9\s-]"


def strip_value(val) -> str:
    """Trim surrounding whitespace only; names are matched exactly as stored."""
    if val is None:
        return ""
    return str(val).strip()


def clean_value(val) -> str:
    """Collapse whitespace and strip surrounding quotes from a raw text value."""
    val = strip_value(val)
    val = re.sub(r"\s+", " ", val)
    return val.replace('"', "").strip()


def clean_list(values) -> list:
    """Trim every entry of a name list, dropping empty values."""
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    out = []
    for v in values:
        sv = strip_value(v)
        if sv:
            out.append(sv)
    return out


def slugify(name: str) -> str:
    """Build a lowercase, dash-separated slug from a display name.

    "Daenerys Targaryen" -> "daenerys-targaryen"
    """
    s = clean_value(name).lower().replace("'", "")
    s = re.sub(SLUG_STRIP_PATTERN, " ", s)
    s = re.sub(r"[\s-]+", "-", s)
    return s.strip("-")
