"""Fighter name normalization."""

from urllib.parse import urlparse


def standardize_name(name: str) -> str:
    """
    Canonicalize a display name into an identity key.

    Hyphens become spaces, words are split on whitespace and each word is
    capitalized ("jon-jones" -> "Jon Jones"). Applying it twice gives the
    same result.
    """
    words = name.replace("-", " ").split()
    return " ".join(word.capitalize() for word in words)


def split_name(key: str) -> tuple[str, str]:
    """Split an identity key into (first_name, last_name)."""
    parts = key.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def name_from_url(url: str) -> str:
    """
    Derive an identity key from a fighter page URL slug.

    ".../history/_/id/5134399/nick-klein" -> "Nick Klein". URLs that end in
    the numeric id carry no name and yield "".
    """
    segments = [s for s in urlparse(url).path.split("/") if s]
    if not segments or segments[-1].isdigit():
        return ""
    return standardize_name(segments[-1])
