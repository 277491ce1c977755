from rich.console import Console

# stderr keeps progress chatter out of the peak listing on stdout
console = Console(stderr=True)

_quiet = False

def set_quiet(flag: bool) -> None:
    """Silence INFO lines; warnings and errors still print."""
    global _quiet
    _quiet = bool(flag)

def info(msg: str) -> None:
    if _quiet:
        return
    console.print(f"[bold cyan]INFO[/bold cyan] {msg}")

def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/bold yellow] {msg}")

def error(msg: str) -> None:
    console.print(f"[bold red]ERROR[/bold red] {msg}")
