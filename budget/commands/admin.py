"""Admin commands for init and backup."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from budget.config import create_default_config, get_config_path
from budget.domain.ledger import LedgerDocument
from budget.store.ledger import LedgerStore

console = Console()


def init_command(store: LedgerStore, force: bool = False) -> None:
    """Create the config file and an empty ledger."""
    config_path = get_config_path()

    ledger_exists = store.exists()
    config_exists = config_path.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (ledger_exists or config_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if ledger_exists:
            console.print(f"  Ledger already exists: {escape(str(store.path))}")
        if config_exists:
            console.print(f"  Config already exists: {escape(str(config_path))}")
        console.print("\n[yellow]Use 'budget init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating ledger at {escape(str(store.path))}...[/cyan]")
        store.save(LedgerDocument())
        console.print("[green]✓[/green] Ledger initialized")

        console.print(f"[cyan]Creating config file at {escape(str(config_path))}...[/cyan]")
        create_default_config(config_path, store.path.resolve())
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")


def backup_command(store: LedgerStore, output_dir: str | None = None) -> None:
    """Copy the ledger and config file to a timestamped backup."""
    config_path = get_config_path()

    if not store.exists():
        console.print("[red]Ledger not found. Add a transaction or run 'budget init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = store.path.parent / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    ledger_backup = backup_dir / f"data_{timestamp}.json"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        shutil.copy2(store.path, ledger_backup)
        console.print(f"[green]✓[/green] Ledger backed up to: {escape(str(ledger_backup))}")

        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {escape(str(config_backup))}")
    except OSError as e:
        console.print(f"[red]Backup failed: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Backup complete![/green]", style="bold")
