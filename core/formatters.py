# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_rule(width: int = 31) -> str:
    return "-" * width


# === number formatters ===


def format_decimal(value: float) -> str:
    # format spec is locale-independent: always "." and no grouping
    return f"{value:.2f}"

