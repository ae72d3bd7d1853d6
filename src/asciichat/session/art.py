"""Fenced block extraction for ascii art replies."""

FENCE = "```"


def extract_fenced_block(text: str, marker: str = FENCE) -> str | None:
    """Extract the span from the first marker through the end of the last one.

    Markers included. Returns None unless the marker occurs at least twice.
    Occurrences may overlap, so four backticks count as two markers.
    """
    start = text.find(marker)
    if start == -1:
        return None
    end = text.rfind(marker)
    if end == start:
        return None
    return text[start:end + len(marker)]
