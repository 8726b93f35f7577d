"""
cli.py - interactive shell around the prefix index
Features:
- Plain lines are tokenised and trained into the trie
- Slash commands for lookups, ranked search and a tree dump
- Uses Rich for tables and formatting
"""

import argparse
import json
import shlex
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from prefix_autocompleter.core.autocompleter import AutoCompleter
from prefix_autocompleter.utils.config_manager import Config, ConfigError

HELP = [
    ("/insert <text>", "store one entry (spaces kept)"),
    ("/exists <text>", "is <text> a stored entry?"),
    ("/search [prefix]", "ranked entries under prefix"),
    ("/display", "breadth-first dump of stored characters"),
    ("/train <file>", "train every token of a text file"),
    ("/stats", "entry count and latencies"),
    ("/config [key val]", "show or change settings"),
    ("/quit", "leave"),
]


class CLI:
    """Command-line interface class to manage user interaction with one AutoCompleter."""

    def __init__(self, cfg: Optional[Config] = None, console: Optional[Console] = None):
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.ac = AutoCompleter(config=self.cfg)
        self.running = True

    @property
    def log(self):
        return self.ac.log

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input.
        - Slash commands are dispatched, anything else is trained.
        """
        self.console.rule("[bold magenta]Prefix Autocompleter[/bold magenta]")
        self.console.print("[cyan]Type text to train it, or /help for commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle(line)

    def handle(self, line: str):
        line = line.strip()
        if not line:
            return
        if not line.startswith("/"):
            n = self.ac.train_lines([line])
            self.console.print(f"[dim]learnt {n} token(s)[/dim]")
            return
        try:
            self._handle_command(line)
        except (ConfigError, OSError, ValueError) as e:
            self.log.error(f"command {line!r} failed: {e}")
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        head, _, rest = line.partition(" ")
        cmd = head.lower()
        # entries are taken verbatim, other commands get shell-style arguments
        raw = rest.lstrip()
        args = [] if cmd in ("/insert", "/exists") else shlex.split(rest)

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
        elif cmd == "/help":
            self._show_help()
        elif cmd == "/insert" and raw:
            entry = raw
            self.ac.add(entry)
            self.console.print(f"[green]Stored:[/green] {escape(entry)}")
        elif cmd == "/exists" and raw:
            entry = raw
            found = self.ac.exists(entry)
            colour = "green" if found else "red"
            self.console.print(f"[{colour}]{escape(repr(entry))} exists: {found}[/{colour}]")
        elif cmd == "/search":
            self._search(" ".join(args))
        elif cmd == "/display":
            self._display()
        elif cmd == "/train" and args:
            self._train_file(args[0])
        elif cmd == "/stats":
            self._show_stats()
        elif cmd == "/config":
            self._config(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    # DISPLAY -------------------------------------------------------------------------------
    def _show_help(self):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Does")
        for c, d in HELP:
            table.add_row(escape(c), d)
        self.console.print(table)

    def _search(self, prefix: str):
        t0 = time.perf_counter()
        suggestions = self.ac.suggest(prefix)
        dt = time.perf_counter() - t0
        if not suggestions:
            self.console.print("[dim](no matches)[/dim]")
            return
        table = Table(title=f"Matches for {prefix!r}", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Entry", style="bold")
        table.add_column("Count", justify="right", style="magenta")
        for i, (entry, count) in enumerate(suggestions, 1):
            table.add_row(str(i), escape(entry), str(count))
        self.console.print(table)
        self.console.print(f"[dim]{dt * 1000:.2f} ms[/dim]")

    def _display(self):
        text = self.ac.render()
        self.console.print(Panel(escape(text) or "(empty)", title="Trie levels", border_style="cyan"))

    def _show_stats(self):
        table = Table(title="Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        for k, v in self.ac.stats().items():
            table.add_row(k, f"{v:.3f}" if isinstance(v, float) else str(v))
        self.console.print(table)

    def _config(self, args: List[str]):
        if not args:
            self.console.print(Panel(json.dumps(self.cfg.data, indent=2), title="Config", border_style="yellow"))
        elif len(args) == 2:
            self.cfg.set(args[0], args[1])
            self.ac.apply_config()
            self.console.print(f"[green]{args[0]} = {self.cfg.get(args[0])}[/green]")
        else:
            self.console.print("usage: /config [key val]")

    def _train_file(self, path: str):
        with open(path, "r", encoding="utf8") as f:
            n = self.ac.train_lines(f)
        self.console.print(f"[green]trained {n} tokens from {path}[/green]")

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prefix-autocompleter", description=__doc__.splitlines()[1])
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--load", help="text file to train before the prompt opens")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    cli = CLI(Config(args.config))
    if args.load:
        cli.handle(f"/train {shlex.quote(args.load)}")
    cli.run()


if __name__ == "__main__":
    main()
