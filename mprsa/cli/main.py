"""mprsa CLI - Main commands."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from mprsa.core.config import EngineConfig
from mprsa.core.exceptions import MPException
from mprsa.core.logging import LogLevel, configure_logging

app = typer.Typer(
    name="mprsa",
    help="Fixed-radix multiprecision arithmetic",
    add_completion=False
)
console = Console()


def parse_int(value: str) -> int:
    """Parse a decimal or 0x/0o/0b prefixed integer."""
    try:
        parsed = int(value, 0)
    except ValueError:
        raise typer.BadParameter(f"Not an integer: {value}")
    if parsed < 0:
        raise typer.BadParameter(f"Expected a non-negative integer, got {value}")
    return parsed


def build_engine(word_bits: int, verbose: bool):
    """Create an engine, turning configuration errors into CLI errors."""
    from mprsa import ArithmeticEngine

    level = LogLevel.DEBUG if verbose else LogLevel.WARNING
    try:
        config = EngineConfig.with_word_bits(word_bits, log_level=level.value)
    except MPException as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)
    configure_logging(level=config.log_level)
    return ArithmeticEngine(config)


@app.command()
def modexp(
    base: str = typer.Argument(..., help="Base g"),
    exponent: str = typer.Argument(..., help="Exponent e"),
    modulus: str = typer.Argument(..., help="Modulus p (at least two words)"),
    word_bits: int = typer.Option(16, "--word-bits", "-w", help="Word width in bits"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine steps"),
):
    """Compute g^e mod p."""
    engine = build_engine(word_bits, verbose)
    try:
        result = engine.mod_exp(parse_int(base), parse_int(exponent), parse_int(modulus))
    except MPException as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(hex(result))


@app.command()
def divide(
    x: str = typer.Argument(..., help="Dividend"),
    y: str = typer.Argument(..., help="Divisor (at least two words)"),
    word_bits: int = typer.Option(16, "--word-bits", "-w", help="Word width in bits"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine steps"),
):
    """Long division: print quotient and remainder."""
    engine = build_engine(word_bits, verbose)
    try:
        quotient, remainder = engine.divmod(parse_int(x), parse_int(y))
    except MPException as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"quotient:  {hex(quotient)}")
    console.print(f"remainder: {hex(remainder)}")


@app.command()
def demo(
    words: bool = typer.Option(False, "--words", help="Show the ciphertext word by word"),
    word_bits: int = typer.Option(16, "--word-bits", "-w", help="Word width in bits"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine steps"),
):
    """Encrypt the sample plaintext block with the sample 512-bit key."""
    from mprsa.core.codec import format_words
    from mprsa.core.samples import SAMPLE_EXPONENT, SAMPLE_MODULUS, SAMPLE_PLAINTEXT

    engine = build_engine(word_bits, verbose)
    ciphertext = engine.mod_exp(SAMPLE_PLAINTEXT, SAMPLE_EXPONENT, SAMPLE_MODULUS)
    expected = pow(SAMPLE_PLAINTEXT, SAMPLE_EXPONENT, SAMPLE_MODULUS)

    console.print(f"modulus:    {hex(SAMPLE_MODULUS)}")
    console.print(f"exponent:   {SAMPLE_EXPONENT}")
    console.print(f"plaintext:  {hex(SAMPLE_PLAINTEXT)}")
    console.print(f"ciphertext: {hex(ciphertext)}")

    if words:
        cipher_words = engine.to_words(ciphertext, len(engine.to_words(SAMPLE_MODULUS)))
        table = Table()
        table.add_column("Index", justify="right", style="cyan")
        table.add_column("Word")
        for index, word in enumerate(cipher_words):
            table.add_row(str(index), format_words([word], radix=engine.radix))
        console.print(table)

    if ciphertext != expected:
        console.print("[red]Mismatch against Python pow()[/red]")
        raise typer.Exit(1)
    console.print("[green]Matches Python pow()[/green]")


def main(argv: Optional[list] = None):
    """Entry point."""
    app(args=argv)


if __name__ == "__main__":
    main()
