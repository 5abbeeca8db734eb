"""
Interactive contacts REPL.
Run: python -m repl (from repo root, with .env or env vars set).
CONTACTS_BACKEND selects the store: "memory" (default) or "redis" (uses REDIS_URL).
"""
import argparse
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

# Repo root: from src/repl/__main__.py go up to repo root (parent.parent.parent when in src layout)
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

import redis

from contacts import Contact, ContactsError, ContactsRepository
from contacts.infrastructure import InMemoryContactsRepository, RedisContactsRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_NO = 0
DEFAULT_PAGE_SIZE = 10


class CommandError(Exception):
    """A REPL line could not be parsed into a command."""


class _ReplArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise CommandError(message)

    def exit(self, status: int = 0, message: str | None = None):
        raise CommandError(message or "Invalid command")


def build_parser() -> argparse.ArgumentParser:
    parser = _ReplArgumentParser(
        prog="",
        description="Small & primitive contacts application with a REPL CLI",
        add_help=False,
    )
    commands = parser.add_subparsers(dest="command", required=True, parser_class=_ReplArgumentParser)

    add = commands.add_parser("add", add_help=False, help="Add a new contact")
    add.add_argument("name", metavar="NAME", help="The name of the contact")
    add.add_argument("phone_no", metavar="PHONE_NO", help="The phone_no of the contact")
    add.add_argument("email", metavar="EMAIL", help="The email of the contact")

    view = commands.add_parser("view", add_help=False, help="View a contact")
    view.add_argument("name", metavar="NAME", help="The name of the contact")

    update_phone = commands.add_parser(
        "update-phone-no", add_help=False, help="Update the phone_no of a contact"
    )
    update_phone.add_argument("name", metavar="NAME", help="The name of the contact")
    update_phone.add_argument("new_phone_no", metavar="NEW_PHONE_NO", help="The new phone_no of the contact")

    update_email = commands.add_parser(
        "update-email", add_help=False, help="Update the email of a contact"
    )
    update_email.add_argument("name", metavar="NAME", help="The name of the contact")
    update_email.add_argument("new_email", metavar="NEW_EMAIL", help="The new email of the contact")

    delete = commands.add_parser("delete", add_help=False, help="Delete a contact")
    delete.add_argument("name", metavar="NAME", help="The name of the contact")

    export = commands.add_parser(
        "export", add_help=False, help="Export contacts to a json file"
    )
    export.add_argument("path", metavar="PATH", help="The path of the json file")

    import_ = commands.add_parser(
        "import", add_help=False, help="Import contacts from a json file"
    )
    import_.add_argument("path", metavar="PATH", help="The path of the json file")

    list_ = commands.add_parser("list", add_help=False, help="List contacts")
    list_.add_argument("page_no", metavar="PAGE_NO", help="Page no.")
    list_.add_argument("page_size", metavar="PAGE_SIZE", help="Page size")

    commands.add_parser("quit", aliases=["exit"], add_help=False, help="Quit the REPL")
    commands.add_parser("help", add_help=False, help="Show available commands")
    return parser


def _parse_or(text: str, default: int) -> int:
    try:
        value = int(text)
    except ValueError:
        return default
    return value if value >= 0 else default


def _format_contact(contact: Contact) -> str:
    return f"Contact\n- name: {contact.name}\n- phone_no: {contact.phone_no}\n- email: {contact.email}"


def _format_prompt(no_of_contacts: int) -> str:
    suffix = "" if no_of_contacts == 1 else "s"
    return f"\n{no_of_contacts} contact{suffix} currently in the data store.\n\n$ "


def respond(
    line: str,
    repo: ContactsRepository,
    out: TextIO = sys.stdout,
    parser: argparse.ArgumentParser | None = None,
) -> bool:
    """Run one REPL line against the repository. Returns True when the user asked to quit.

    Raises CommandError for unparsable lines and ContactsError/OSError from the repository.
    """
    try:
        args = shlex.split(line)
    except ValueError as exc:
        raise CommandError("Invalid quoting") from exc
    parser = parser or build_parser()
    ns = parser.parse_args(args)
    command = ns.command

    if command == "add":
        repo.add(ns.name, ns.phone_no, ns.email)
        out.write("Contact added successfully\n")
    elif command == "view":
        contact = repo.get(ns.name)
        if contact is None:
            out.write(f"No contact with name {ns.name}\n")
        else:
            out.write(_format_contact(contact) + "\n")
    elif command == "update-phone-no":
        if repo.update_phone(ns.name, ns.new_phone_no):
            out.write("Contact updated successfully\n")
        else:
            out.write(f"No contact with name {ns.name}\n")
    elif command == "update-email":
        if repo.update_email(ns.name, ns.new_email):
            out.write("Contact updated successfully\n")
        else:
            out.write(f"No contact with name {ns.name}\n")
    elif command == "delete":
        if repo.delete(ns.name) is None:
            out.write(f"No contact with name {ns.name}\n")
        else:
            out.write("Contact deleted successfully\n")
    elif command == "export":
        repo.export_to_json(ns.path)
        out.write("Contacts exported successfully\n")
    elif command == "import":
        repo.import_from_json(ns.path)
        out.write("Contacts imported successfully\n")
    elif command == "list":
        page_no = _parse_or(ns.page_no, DEFAULT_PAGE_NO)
        page_size = _parse_or(ns.page_size, DEFAULT_PAGE_SIZE)
        for contact in repo.list_page(page_no, page_size):
            out.write("-------------\n" + _format_contact(contact) + "\n")
        out.write("-------------\n")
    elif command in ("quit", "exit"):
        out.write("Exiting...\n")
        return True
    elif command == "help":
        out.write(parser.format_help())
    return False


def _get_repository() -> ContactsRepository:
    backend = os.environ.get("CONTACTS_BACKEND", "memory").strip().lower()
    if backend == "memory":
        return InMemoryContactsRepository()
    if backend == "redis":
        url = os.environ.get("REDIS_URL", "redis://localhost:6379/0").strip()
        logger.info("Using Redis contacts store at %s", url)
        return RedisContactsRepository(redis.Redis.from_url(url, decode_responses=True))
    raise SystemExit(f"Unknown CONTACTS_BACKEND: {backend!r} (expected 'memory' or 'redis')")


def run(
    repo: ContactsRepository,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
) -> None:
    """Read-eval-print loop until quit or end of input."""
    out.write("contacts-app\n\nUse `help` to discover more commands, or `quit` to exit the REPL\n")
    parser = build_parser()
    while True:
        try:
            prompt = _format_prompt(repo.count())
        except (ContactsError, redis.RedisError) as exc:
            err.write(f"Err: {exc}\n")
            err.flush()
            prompt = "\n$ "
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        try:
            if respond(line, repo, out=out, parser=parser):
                break
        except (CommandError, ContactsError, OSError, redis.RedisError) as exc:
            err.write(f"Err: {exc}\n")
            err.flush()


def main() -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    run(_get_repository())


if __name__ == "__main__":
    main()
