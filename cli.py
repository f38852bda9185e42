# cli.py
import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.logging import RichHandler
from rich.text import Text
from rich import box

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.collection import CollectionView
from sdk.config import settings
from sdk.models import Product
from sdk.notices import Notice, NoticeBoard
from sdk.pyinventory import AsyncInventoryClient
from sdk.store import InventoryStore, ViewState
from sdk.views import stock_status, stock_fill

console = Console()
logger = logging.getLogger("pyinventory.cli")

BAR_WIDTH = 10

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_status(notice: Notice):
    style = "green" if notice.is_success else ("red" if notice.level == "error" else "cyan")
    console.print(Panel.fit(f"[{style}]{notice.message}[/{style}]", title="Status"))


def stock_bar(quantity: int) -> Text:
    status = stock_status(quantity)
    filled = round(stock_fill(quantity) * BAR_WIDTH)
    bar = Text("█" * filled, style=status.color)
    bar.append("░" * (BAR_WIDTH - filled), style="dim")
    return bar


def show_dashboard(state: ViewState):
    m = state.metrics
    cards = Table.grid(padding=(0, 4))
    cards.add_column(justify="center")
    cards.add_column(justify="center")
    cards.add_column(justify="center")
    cards.add_row("Total Products", "Low Stock", "Categories")
    cards.add_row(f"[bold]{m.total_products}[/bold]", f"[bold red]{m.low_stock}[/bold red]", f"[bold]{m.categories}[/bold]")
    filters = f"Category: [cyan]{state.selected_category}[/cyan]  Search: [cyan]{state.search_term or '-'}[/cyan]"
    console.print(Panel(cards, title="📊 Inventory", subtitle=filters, border_style="blue"))


def show_products(view: CollectionView, state: ViewState):
    if not state.visible:
        console.print("[italic yellow]No products found.[/italic yellow]")
        return

    table = Table(
        title="📦 Products",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=24)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Category", width=14)
    table.add_column("Stock", width=BAR_WIDTH + 2)
    table.add_column("Image", style="dim", width=18)

    for p in state.visible:
        status = stock_status(p.quantity)
        stock = Text(status.label + "\n", style=f"bold {status.color}")
        stock.append(stock_bar(p.quantity))
        name = p.name
        if view.is_busy(p):
            name += f"\n[dim]{view.delete_label(p)}[/dim]"
        table.add_row(
            str(p.id),
            name,
            p.description or "",
            f"${p.price:.2f}",
            str(p.quantity),
            p.category,
            stock,
            p.image_or_placeholder,
        )
    console.print(table)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "📦 PyInventory",
        "[bold blue]Inventory Management CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
_session: Optional[PromptSession] = None


async def prompt_with_autocomplete(message: str, completer=None, default: str = "") -> str:
    global _session
    if _session is None:
        _session = PromptSession(style=custom_style)
    return await _session.prompt_async(f"{message} ", completer=completer, default=default)


async def with_spinner(coro):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
    ) as progress:
        progress.add_task(description="Processing...", total=None)
        return await coro


def product_completer(state: ViewState):
    ids = [str(p.id) for p in state.visible]
    return WordCompleter(ids, ignore_case=True)


async def pick_product(view: CollectionView) -> Optional[Product]:
    state = view.snapshot()
    raw = (await prompt_with_autocomplete("Enter product ID", completer=product_completer(state))).strip()
    for p in view.store.products:
        if str(p.id) == raw:
            return p
    console.print(f"[red]No product with ID '{raw}'[/red]")
    return None


async def fill_and_submit(view: CollectionView):
    editor = view.editor
    console.print(Panel.fit(f"[bold]{editor.title}[/bold]", border_style="cyan"))
    d = editor.draft
    editor.set_field("name", await prompt_with_autocomplete("Product Name", default=d.name))
    categories = WordCompleter(view.snapshot().categories[1:], ignore_case=True)
    editor.set_field("category", await prompt_with_autocomplete("🏷️ Category", completer=categories, default=d.category))
    editor.set_field("price", await prompt_with_autocomplete("💰 Price", default=d.price))
    editor.set_field("quantity", await prompt_with_autocomplete("📦 Quantity", default=d.quantity))
    editor.set_field("description", await prompt_with_autocomplete("Description", default=d.description))
    console.print(f"[dim]{editor.submit_label}[/dim]")
    return await with_spinner(editor.submit())


def confirm_delete(product: Product) -> bool:
    return Confirm.ask(f"Are you sure you want to delete [bold]{product.name}[/bold]?")


# ---------------------------
# Main menu
# ---------------------------
async def menu(view: CollectionView):
    console.clear()
    console.print(create_header())

    await with_spinner(view.fetch_all())

    while True:
        state = view.snapshot()
        show_dashboard(state)

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        edit_label = "✏️ Edit product" if view.store.editing is None else f"✏️ Editing {view.store.editing.name}"
        options = [
            ("1", "📦 List products", "5", edit_label),
            ("2", "🔍 Search products", "6", "🗑️ Delete product"),
            ("3", "🏷️ Filter by category", "7", "🧹 Clear filters"),
            ("4", "➕ Add product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = (await prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        )).strip()

        if choice == "1":
            show_products(view, state)

        elif choice == "2":
            term = await prompt_with_autocomplete("Search products...", default=state.search_term)
            view.set_search(term)
            show_products(view, view.snapshot())

        elif choice == "3":
            category = await prompt_with_autocomplete(
                "Category", completer=WordCompleter(list(state.categories), ignore_case=True),
                default=state.selected_category,
            )
            if category not in state.categories:
                console.print(f"[yellow]Unknown category '{category}', showing all[/yellow]")
                category = state.categories[0]
            view.set_filter(category)
            show_products(view, view.snapshot())

        elif choice == "4":
            if view.store.editing is not None:
                view.cancel_edit()
            await fill_and_submit(view)

        elif choice == "5":
            if view.store.editing is None:
                product = await pick_product(view)
                if product is None:
                    continue
                view.edit(product)
                if view.store.editing is None:
                    continue
            await fill_and_submit(view)

        elif choice == "6":
            product = await pick_product(view)
            if product is not None:
                await with_spinner(view.delete(product, confirm_delete))

        elif choice == "7":
            view.set_filter(state.categories[0])
            view.set_search("")

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                return

        console.print()
        console.rule(style="dim")


async def run(base_url: str):
    notices = NoticeBoard(listener=show_status)
    logger.debug("using product API at %s", base_url)
    async with AsyncInventoryClient(base_url=base_url) as client:
        view = CollectionView(InventoryStore(), client, notices)
        await menu(view)


def main(argv=None):
    parser = argparse.ArgumentParser(description="PyInventory CLI")
    parser.add_argument("--base-url", default=settings.api_base_url, help="Product API base address")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        asyncio.run(run(args.base_url))
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
