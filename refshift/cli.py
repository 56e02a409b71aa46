"""refshift CLI - run the string-ref migration over explicit files."""

import difflib
from pathlib import Path

import click

from refshift import __version__
from refshift.config import load_runtime_config
from refshift.parser import SUPPORTED_DIALECTS, ParseError
from refshift.transform import transform
from refshift.ui import console
from refshift.utils import ExitCodes, handle_exceptions, logger


def unified_diff(path: str, before: str, after: str) -> str:
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )


@click.command()
@handle_exceptions
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--dry-run", "-d", is_flag=True, help="Do not write changes back to disk")
@click.option("--print", "-p", "print_output", is_flag=True, help="Print transformed source to stdout")
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of each change")
@click.option(
    "--dialect",
    type=click.Choice(("auto",) + SUPPORTED_DIALECTS),
    default=None,
    help="Grammar to parse with (default: from config, 'auto' picks by extension)",
)
@click.option("--factory", default=None, help="Ref factory to call (default: React.createRef)")
@click.version_option(__version__, prog_name="refshift")
def main(files, dry_run, print_output, show_diff, dialect, factory):
    """Convert React string refs (ref="name") into createRef() object refs.

    For each FILE, every `ref="name"` attribute inside a class component
    becomes `ref={this.nameRef}`, a `nameRef = React.createRef();` field is
    prepended to the class, and `this.refs.name` reads become
    `this.nameRef.current`.

    Examples:
      refshift src/Form.jsx --dry-run --diff
      refshift src/Form.jsx src/List.tsx
    """
    cfg = load_runtime_config()
    dialect = dialect or cfg["transform"]["dialect"]
    factory = factory or cfg["transform"]["factory"]
    encoding = cfg["files"]["encoding"]
    max_size = cfg["files"]["max_file_size"]

    exit_code = ExitCodes.SUCCESS
    modified = 0
    migrated = 0

    for path in files:
        if path.stat().st_size > max_size:
            logger.warning("Skipping {}: larger than {} bytes", path, max_size)
            continue

        try:
            with open(path, encoding=encoding, newline="") as f:
                source = f.read()
            result = transform(
                source,
                path=str(path),
                dialect=None if dialect == "auto" else dialect,
                factory=factory,
            )
        except UnicodeDecodeError as e:
            logger.error("Encoding error in {}: {}", path, e)
            exit_code = max(exit_code, ExitCodes.PARSE_FAILURE)
            continue
        except ParseError as e:
            logger.error("{}", e)
            exit_code = max(exit_code, ExitCodes.PARSE_FAILURE)
            continue

        if result.skipped:
            exit_code = max(exit_code, ExitCodes.REFS_SKIPPED)

        if print_output:
            click.echo(result.output, nl=False)

        if not result.changed:
            console.print(f"  [dim]unchanged[/dim] [path]{path}[/path]", highlight=False)
            continue

        modified += 1
        migrated += len(result.rewrites)

        if show_diff:
            click.echo(unified_diff(str(path), result.source, result.output), nl=False)

        if not dry_run:
            with open(path, "w", encoding=encoding, newline="") as f:
                f.write(result.output)

        mode = "[warning]dry-run[/warning]" if dry_run else "[success]ok[/success]"
        console.print(
            f"  {mode} [path]{path}[/path] ({len(result.rewrites)} ref(s))", highlight=False
        )

    console.print(
        f"Files modified: {modified}  Refs migrated: {migrated}"
        + ("  [dim](dry run - nothing written)[/dim]" if dry_run else ""),
        highlight=False,
    )
    if exit_code != ExitCodes.SUCCESS:
        console.print(f"[warning]{ExitCodes.get_description(exit_code)}[/warning]")

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
