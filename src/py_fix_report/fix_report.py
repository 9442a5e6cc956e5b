"""Plain text high/low table."""

ACCOUNT_WIDTH = 12
PRICE_WIDTH = 8


def format_report(high_low) -> str:
    """Render {account: (high, low)} as a fixed-width table."""
    rule_width = ACCOUNT_WIDTH + 2 * PRICE_WIDTH
    lines = [
        "High/Low Report:",
        f"{'Account':<{ACCOUNT_WIDTH}}{'High':<{PRICE_WIDTH}}{'Low':<{PRICE_WIDTH}}",
        "-" * rule_width,
    ]
    for account, (high, low) in high_low.items():
        lines.append(
            f"{account:<{ACCOUNT_WIDTH}}{str(high):<{PRICE_WIDTH}}{str(low):<{PRICE_WIDTH}}"
        )
    return "\n".join(lines) + "\n"
