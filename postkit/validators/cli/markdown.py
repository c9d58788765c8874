"""
Markdown Validation Commands
-----------------------------

Commands for validating markdown posts.

Commands:
    - frontmatter: Validate YAML front matter
    - fences: Check that fenced code blocks are balanced
    - thumbnails: Check thumbnail and image assets exist
    - links: Check for broken relative markdown links
    - all: Run all markdown validation checks
"""
import click
from pathlib import Path
from typing import Optional

from postkit.core.paths import ASSETS_DIR, LOG_DIR, POSTS_DIR


@click.group()
@click.option(
    "--md-dir",
    type=click.Path(exists=True, file_okay=False),
    default=str(POSTS_DIR),
    help="Markdown directory to validate",
)
@click.option(
    "--assets-dir",
    type=click.Path(file_okay=False),
    default=str(ASSETS_DIR),
    help="Asset tree that thumbnails resolve against",
)
@click.option(
    "--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files"
)
@click.pass_context
def md(ctx: click.Context, md_dir: str, assets_dir: str, log_dir: str) -> None:
    """
    Validate markdown posts.

    Check front matter, thumbnail assets, code fences, links and
    content problems.
    """
    from postkit.core.cli import setup_logger

    ctx.ensure_object(dict)
    ctx.obj["md_dir"] = Path(md_dir)
    ctx.obj["assets_dir"] = Path(assets_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["logger"] = setup_logger(Path(log_dir), "validators")


def _validator(ctx: click.Context):
    from postkit.validators.md import MarkdownValidator

    return MarkdownValidator(
        ctx.obj["md_dir"], assets_dir=ctx.obj["assets_dir"], logger=ctx.obj["logger"]
    )


def _run_category(ctx: click.Context, category: str, label: str) -> None:
    """Validate every post and report only one issue category."""
    from postkit.validators.md import format_markdown_report

    report = _validator(ctx).validate_all().only(category)
    click.echo(format_markdown_report(report, f"{label.upper()} REPORT"))

    if report.has_errors:
        raise click.ClickException(f"Found {report.total_errors} {label} error(s)")


@md.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def frontmatter(ctx: click.Context, file_path: Optional[str]) -> None:
    """
    Validate YAML front matter in markdown posts.

    Checks for:
    - Valid YAML syntax
    - Required fields (title, date)
    - Field types and date format
    - Unknown fields
    """
    md_dir = ctx.obj["md_dir"]

    if not file_path:
        click.echo(f"🔍 Validating front matter in {md_dir}\n")
        _run_category(ctx, "frontmatter", "front matter")
        return

    issues = [
        i for i in _validator(ctx).validate_file(Path(file_path))
        if i.category == "frontmatter"
    ]
    if not issues:
        click.echo("✅ No front matter issues found")
        return

    for issue in issues:
        icon = "❌" if issue.severity == "error" else "⚠️"
        line_info = f":{issue.line_number}" if issue.line_number else ""
        click.echo(f"{icon} {Path(file_path).name}{line_info} {issue.message}")
        if issue.suggestion:
            click.echo(f"   💡 {issue.suggestion}")

    errors = sum(1 for i in issues if i.severity == "error")
    if errors:
        raise click.ClickException(f"Found {errors} front matter error(s)")


@md.command()
@click.pass_context
def fences(ctx: click.Context) -> None:
    """Check that every fenced code block is closed."""
    click.echo(f"🔍 Checking code fences in {ctx.obj['md_dir']}\n")
    _run_category(ctx, "fence", "code fence")


@md.command()
@click.pass_context
def thumbnails(ctx: click.Context) -> None:
    """Check that thumbnails and body images exist in the asset tree."""
    click.echo(f"🔍 Checking assets against {ctx.obj['assets_dir']}\n")
    _run_category(ctx, "asset", "asset")


@md.command()
@click.pass_context
def links(ctx: click.Context) -> None:
    """
    Check for broken relative markdown links.

    External links, anchors and site-absolute routes are skipped.
    """
    click.echo(f"🔍 Checking markdown links in {ctx.obj['md_dir']}\n")

    issues = _validator(ctx).validate_links()

    if issues:
        for issue in issues:
            click.echo(f"❌ {issue.file_path.name}:{issue.line_number}")
            click.echo(f"   {issue.message}")
            if issue.suggestion:
                click.echo(f"   💡 {issue.suggestion}")
            click.echo()

        raise click.ClickException(f"Found {len(issues)} broken link(s)")

    click.echo("✅ All markdown links are valid")


@md.command(name="all")
@click.pass_context
def all_checks(ctx: click.Context) -> None:
    """
    Run all markdown validation checks.

    Front matter, assets, fences, content and links in one report.
    """
    from postkit.validators.md import format_markdown_report

    click.echo(f"🔍 Running comprehensive validation on {ctx.obj['md_dir']}\n")

    validator = _validator(ctx)
    report = validator.validate_all()
    report.add_issues(validator.validate_links())

    click.echo(format_markdown_report(report))

    if not report.is_healthy:
        raise click.ClickException(
            f"Markdown validation failed with {report.total_errors} error(s)"
        )
