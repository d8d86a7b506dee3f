#!/usr/bin/env python3
"""
SecurePass - Secure Password Generator CLI
"""
import logging
import sys
import threading
import time

import click
import pyperclip
from tabulate import tabulate

from . import __version__, config
from .categories import CATEGORY_ORDER, CharacterCategory
from .errors import ErrorKind
from .generator import PasswordGenerator

CLIPBOARD_UNAVAILABLE = "Clipboard unavailable. Copy manually."
SECURE_RANDOM_HELP = (
    "Secure password generation requires a cryptographically secure random "
    "source (os.urandom). Check that this platform provides one."
)


def secure_clipboard_copy(password: str) -> bool:
    """Copy password to clipboard; False if no clipboard is available"""
    try:
        pyperclip.copy(password)
    except pyperclip.PyperclipException:
        return False
    return True


def clear_clipboard_after_delay(password: str, seconds: int) -> threading.Thread:
    """
    Start a thread that clears the clipboard after `seconds`.

    The clipboard is only cleared if it still holds `password`. The
    caller must join() the thread before exiting or the clear never runs.
    """
    def clear():
        time.sleep(seconds)
        try:
            if pyperclip.paste() == password:
                pyperclip.copy("")
        except pyperclip.PyperclipException:
            pass

    thread = threading.Thread(target=clear)
    thread.start()
    return thread


def enabled_categories(no_lowercase, no_uppercase, no_digits, no_symbols):
    """Translate the --no-* flags into a list of categories"""
    disabled = {
        CharacterCategory.LOWERCASE: no_lowercase,
        CharacterCategory.UPPERCASE: no_uppercase,
        CharacterCategory.DIGITS: no_digits,
        CharacterCategory.SYMBOLS: no_symbols,
    }
    return [c for c in CATEGORY_ORDER if not disabled[c]]


@click.group()
@click.version_option(version=__version__, prog_name="SecurePass")
def cli():
    """SecurePass - A secure password generator

    Passwords are drawn from the operating system's CSPRNG with unbiased
    sampling and always include every selected character type.
    """
    pass


@cli.command()
@click.option('--length', '-l', default=config.DEFAULT_LENGTH, type=int, show_default=True,
              help='Password length')
@click.option('--count', '-c', default=1, type=click.IntRange(min=1), help='Number of passwords to generate')
@click.option('--no-lowercase', is_flag=True, help='Exclude lowercase letters')
@click.option('--no-uppercase', is_flag=True, help='Exclude uppercase letters')
@click.option('--no-digits', is_flag=True, help='Exclude numbers')
@click.option('--no-symbols', is_flag=True, help='Exclude symbols')
@click.option('--copy', is_flag=True, help='Copy the (last) password to the clipboard')
@click.option('--timeout', '-t', default=config.CLIPBOARD_TIMEOUT, type=int,
              help="Clear clipboard after N seconds (0 = don't clear)")
@click.option('--verbose', '-v', is_flag=True, help='Log generation details')
def generate(length, count, no_lowercase, no_uppercase, no_digits, no_symbols, copy, timeout, verbose):
    """Generate secure passwords"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s - %(levelname)s - %(message)s')

    generator = PasswordGenerator()
    categories = enabled_categories(no_lowercase, no_uppercase, no_digits, no_symbols)

    passwords = []
    for _ in range(count):
        result = generator.generate(length, categories)
        if not result.ok:
            if result.error is ErrorKind.SECURE_RANDOM_UNAVAILABLE:
                click.echo(click.style(f"❌ {SECURE_RANDOM_HELP}", fg='red'), err=True)
                sys.exit(2)
            click.echo(click.style(f"⚠️  {result.message}", fg='yellow'), err=True)
            sys.exit(1)
        passwords.append(result.password)

    for i, password in enumerate(passwords, 1):
        if count == 1:
            click.echo(click.style(password, fg='green', bold=True))
        else:
            click.echo(f"{i}. {click.style(password, fg='green', bold=True)}")

    if copy:
        if secure_clipboard_copy(passwords[-1]):
            click.echo("✅ Password copied to clipboard.")
            if timeout > 0:
                click.echo(f"⏱️  Clipboard will auto-clear in {timeout} seconds...")
                clear_clipboard_after_delay(passwords[-1], timeout).join()
                click.echo("🧹 Clipboard cleared.")
        else:
            click.echo(f"⚠️  {CLIPBOARD_UNAVAILABLE}", err=True)


@cli.command()
def categories():
    """List the character types passwords can draw from"""
    rows = [
        [c.value, c.label, len(c.alphabet), c.alphabet]
        for c in CATEGORY_ORDER
    ]
    click.echo(tabulate(rows, headers=['Name', 'Description', 'Size', 'Characters'], tablefmt='simple'))
    click.echo(f"\nLength: {config.MIN_LENGTH}-{config.MAX_LENGTH} (default {config.DEFAULT_LENGTH})")


@cli.command()
def version():
    """Show SecurePass version and info"""
    click.echo("\n🔐 SecurePass Password Generator")
    click.echo(f"Version: {__version__}")
    click.echo("License: MIT")
    click.echo("\nPasswords are generated locally and never stored.")
    click.echo("\nFor help: securepass --help")


# Entry point
if __name__ == '__main__':
    cli()
