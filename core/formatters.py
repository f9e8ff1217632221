# core/formatters.py

# all pure text utilities
# must never import from models!

CARET = "▏"

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_boxed_text(title: str, body: str, width: int = 40) -> str:
    top = f"┌─ {title} " + "─" * max(0, width - len(title) - 5) + "┐"
    bottom = "└" + "─" * (width - 2) + "┘"

    return f"{top}\n  {body}\n{bottom}"


def format_text_with_caret(text: str, cursor: int) -> str:
    """Inserts a caret at character offset `cursor` (clamped to the text)."""
    cursor = max(0, min(cursor, len(text)))

    return f"{text[:cursor]}{CARET}{text[cursor:]}"


def format_key_help(pairs: list[tuple[str, str]]) -> str:
    return ", ".join(f"{key} = {description}" for key, description in pairs) + "."
