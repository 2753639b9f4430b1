import regex as re

NOT_ALPHA_OR_SPACE_RE = re.compile(r"[^\p{Alphabetic} ]+")


def sanitize_text(text: str) -> str:
    """Make ``text`` safe to send to mystem as a single request line.

    Keeps letters and plain spaces only: punctuation, digits, tabs and
    newlines are removed, so the request can never split into two lines.
    """
    return NOT_ALPHA_OR_SPACE_RE.sub("", text.strip())
