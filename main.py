import asyncio
import hashlib
import sys
import threading
import time
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from config.api_settings import PROVIDER_ORDER, ApiSettings
from config.config import get_config
from config.settings_manager import ApiSettingsManager
from db.settings_store import SettingsStore
from models.search import SearchPage
from orchestrator.core import SearchOrchestrator
from utils.page_renderer import compose_document

PAGES_DIR = Path("generated_pages")

HELP_TEXT = """
=== Available Commands ===
<query>                   - Search for something new
n / p                     - Next / previous results page
page <n>                  - Jump to results page n
open <i>                  - Generate the page for result i and save it as HTML
provider <name>           - Switch provider (openrouter, openai)
key <provider> <api_key>  - Store an API key
model <provider> <model>  - Store a model name
settings                  - Show provider settings
help                      - Show this help message
exit/quit                 - Exit the program
"""

NUMERIC_COMMANDS = {"page": "page <n>", "open": "open <i>"}


def usage_error(command: str, argument: str) -> str | None:
    """
    Usage hint for a numbered command given without a valid number.

    A multi-word argument is not a command at all (``open source licenses``)
    and falls through to a search, so it returns None.
    """
    if command not in NUMERIC_COMMANDS or argument.isdigit() or " " in argument:
        return None
    return f"Usage: {NUMERIC_COMMANDS[command]}"


def show_loading_animation(stop_event: threading.Event, label: str) -> None:
    """
    Show a loading animation in the console.

    Args:
        stop_event: A threading.Event that will be set to stop the animation
        label: Text shown next to the spinner
    """
    while not stop_event.is_set():
        for char in "|/-\\":
            if stop_event.is_set():
                break
            sys.stdout.write(f"\r\033[93m{label} {char}\033[0m")
            sys.stdout.flush()
            time.sleep(0.1)

    sys.stdout.write("\r" + " " * (len(label) + 4) + "\r")
    sys.stdout.flush()


def run_with_spinner(coro, label: str):
    stop_animation = threading.Event()
    loading_thread = threading.Thread(
        target=show_loading_animation, args=(stop_animation, label), daemon=True
    )
    loading_thread.start()
    try:
        return asyncio.run(coro)
    finally:
        stop_animation.set()
        loading_thread.join()


def print_results(search_page: SearchPage) -> None:
    if not search_page.results:
        print(f'\nNo results for "{search_page.query}".\n')
        return

    print(f'\n=== "{search_page.query}" - page {search_page.pagination.current_page} ===')
    for index, result in enumerate(search_page.results, start=1):
        print(f"{index:>2}. {result.title}")
        print(f"    {result.url}")
        print(f"    {result.description}")

    hints = ["n = next page"]
    if search_page.pagination.has_previous_page:
        hints.insert(0, "p = previous page")
    print(f"[{', '.join(hints)}, open <i> = view result]\n")


def print_settings(settings: ApiSettings) -> None:
    print("\n=== API Settings ===")
    active = settings.best_provider()
    for name in PROVIDER_ORDER:
        creds = settings.credentials(name)
        marker = "* " if name == active else "  "
        status = "configured" if creds.is_configured else "no API key"
        print(f"{marker}{name}: {creds.model} ({status})")
    print("* = active provider\n")


def save_page(search_page: SearchPage | None, orchestrator: SearchOrchestrator, index: int):
    if search_page is None or not 1 <= index <= len(search_page.results):
        print("\nNo such result. Run a search and pick a number from the list.\n")
        return

    result = search_page.results[index - 1]
    outcome = run_with_spinner(
        orchestrator.open_result(result, orchestrator.active_query), "Imagining page"
    )
    if not outcome.is_available:
        print(f"\nCould not generate this page: {outcome.error}\nBack to results.\n")
        return

    PAGES_DIR.mkdir(exist_ok=True)
    path = PAGES_DIR / f"{hashlib.sha256(result.url.encode('utf-8')).hexdigest()[:16]}.html"
    path.write_text(compose_document(outcome.page), encoding="utf-8")
    source = "cache" if outcome.cached else "provider"
    print(f"\n{outcome.page.title}\n{outcome.page.url}\nSaved to {path} (from {source})\n")


def main():
    config = get_config()
    manager = ApiSettingsManager(SettingsStore(defaults=ApiSettings.defaults(config)))
    orchestrator = SearchOrchestrator(settings_provider=manager.current)
    search_page: SearchPage | None = None

    print("\n=== Imagined Search ===")
    print("Why limit yourself to searching results when you can imagine them?")
    print("Type a query to search, 'help' for commands, or 'exit' to quit\n")

    if not manager.current().has_valid_configuration():
        print("No API configured. Use 'key <provider> <api_key>' to add one.\n")

    while True:
        try:
            user_input = input("Search: ").strip()
            if not user_input:
                continue

            command, _, argument = user_input.partition(" ")
            command = command.lower()
            argument = argument.strip()

            if command in ("exit", "quit"):
                print("\nGoodbye!")
                break

            if command == "help":
                print(HELP_TEXT)
                continue

            if command == "settings":
                print_settings(manager.current())
                continue

            if command == "provider" and argument:
                manager.change_provider(argument)
                print_settings(manager.current())
                continue

            if command in ("key", "model") and argument:
                provider, _, value = argument.partition(" ")
                if command == "key":
                    manager.update_provider(provider, api_key=value.strip())
                else:
                    manager.update_provider(provider, model=value.strip())
                print_settings(manager.current())
                continue

            usage = usage_error(command, argument)
            if usage:
                print(f"\n{usage}\n")
                continue

            navigating = command in ("n", "p") or (
                command in NUMERIC_COMMANDS and argument.isdigit()
            )
            if navigating and not orchestrator.active_query:
                print("\nRun a search first.\n")
                continue

            if command == "n":
                search_page = run_with_spinner(orchestrator.next_page(), "Searching")
            elif command == "p":
                search_page = run_with_spinner(orchestrator.previous_page(), "Searching")
            elif command == "page" and argument.isdigit():
                search_page = run_with_spinner(
                    orchestrator.load_page(int(argument)), "Searching"
                )
            elif command == "open" and argument.isdigit():
                save_page(search_page, orchestrator, int(argument))
                continue
            else:
                search_page = run_with_spinner(orchestrator.new_search(user_input), "Searching")

            print_results(search_page)

        except KeyboardInterrupt:
            print("\nExiting...")
            break
        except ValueError as e:
            print(f"\nError: {e!s}\n")
            continue


if __name__ == "__main__":
    main()
