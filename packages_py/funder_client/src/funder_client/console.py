"""
Rich request/response panels for verbose clients.
"""
import json
from typing import Any, Dict, Mapping, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console()

_SENSITIVE_HEADERS = frozenset({"authorization", "x-api-key", "cookie", "set-cookie"})


def mask_sensitive(value: Optional[str], show_chars: int = 4) -> str:
    """Mask sensitive values for display."""
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {
        key: mask_sensitive(value) if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _format_body(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    return str(body)


def print_panel(content: str, title: Optional[str] = None) -> None:
    console.print(Panel(content, title=title))


def print_syntax_panel(code: str, lexer: str = "json", title: Optional[str] = None) -> None:
    syntax = Syntax(code, lexer, theme="monokai")
    console.print(Panel(syntax, title=title, expand=True))


def print_request(method: str, url: str, headers: Mapping[str, str], content: Optional[str]) -> None:
    print_panel(f"[bold cyan]{method}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]")
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if content:
        print_syntax_panel(content, lexer="text", title="[bold]Request Body[/bold]")


def print_response(url: str, status: int, headers: Mapping[str, str], body: Any) -> None:
    color = "green" if 200 <= status <= 299 else "red"
    print_panel(
        f"[bold {color}]{status}[/bold {color}]",
        title=f"[bold blue]Response[/bold blue] ({url})",
    )
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body:
        print_syntax_panel(_format_body(body), title=f"[bold]Response Body[/bold] (URL: {url})")


def print_unavailable(url: str, message: str) -> None:
    print_panel(
        f"[bold red]Service unavailable[/bold red] {message}",
        title=f"[bold blue]Response[/bold blue] ({url})",
    )
