"""Rich console singleton."""

from rich.console import Console

# Global console instance, on stderr so overlays never mix with logged stdout
console = Console(stderr=True)


def get_console() -> Console:
    """Get the global console instance."""
    return console
