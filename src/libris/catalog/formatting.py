# ABOUTME: Display helpers for author and subject lists.
# ABOUTME: Used by the CLI tables and detail views.


def format_authors(authors: list[str]) -> str:
    """Join authors for display: 'A', 'A and B', or 'A, B, and C'."""
    if not authors:
        return "Unknown"
    if len(authors) == 1:
        return authors[0]
    if len(authors) == 2:
        return f"{authors[0]} and {authors[1]}"
    return ", ".join(authors[:-1]) + ", and " + authors[-1]


def format_subjects(subjects: list[str]) -> str:
    """Comma-join subjects, or 'None' when there are none."""
    if not subjects:
        return "None"
    return ", ".join(subjects)
