"""Cosmetic dedent of composed SQL text."""


def format_sql(sql: str) -> str:
    """
    Cheap best attempt at removing indentation from multi-line SQL.

    Whitespace-only lines are dropped, then the smallest indentation left is
    stripped from every line. Placeholders are never touched.
    """
    pieces = [p for p in sql.split("\n") if p.strip()]
    if not pieces:
        return ""
    leading = min(len(p) - len(p.lstrip()) for p in pieces)
    return "\n".join(p[leading:] for p in pieces)
