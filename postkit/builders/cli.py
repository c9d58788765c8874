"""
Listing CLI
-----------

Commands for the date-ordered post listing.

Commands:
    - show: Print posts in display order
    - build: Write the listing data file for the site generator
"""
import click
from pathlib import Path

from postkit.core.cli import setup_logger
from postkit.core.exceptions import ListingError
from postkit.core.logging_manager import handle_cli_error
from postkit.core.paths import LISTING_PATH, LOG_DIR, POSTS_DIR


@click.group()
@click.option(
    "--posts-dir",
    type=click.Path(file_okay=False),
    default=str(POSTS_DIR),
    help="Directory containing markdown posts",
)
@click.option(
    "--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files"
)
@click.option("--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, posts_dir: str, log_dir: str, verbose: bool) -> None:
    """Build the post listing used by index pages."""
    ctx.ensure_object(dict)
    ctx.obj["posts_dir"] = Path(posts_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "listing")


@cli.command()
@click.option("--include-drafts", is_flag=True, help="List draft posts too")
@click.pass_context
def show(ctx: click.Context, include_drafts: bool) -> None:
    """Print posts newest first."""
    from postkit.builders.listing import ListingBuilder

    builder = ListingBuilder(
        ctx.obj["posts_dir"], include_drafts=include_drafts, logger=ctx.obj["logger"]
    )
    try:
        posts = builder.collect()
    except ListingError as e:
        handle_cli_error(ctx, e, "show_listing")
        return

    if not posts:
        click.echo("No posts found")
        return

    for post in posts:
        marker = " (draft)" if post.front_matter.draft else ""
        click.echo(f"{post.date.isoformat()}  {post.title}{marker}")
        if post.thumbnail:
            click.echo(f"            🖼  {post.thumbnail}")

    click.echo(f"\n{builder.stats.summary()}")


@cli.command()
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=str(LISTING_PATH),
    help="Where to write the listing YAML",
)
@click.option("--include-drafts", is_flag=True, help="List draft posts too")
@click.pass_context
def build(ctx: click.Context, output: str, include_drafts: bool) -> None:
    """Write the listing data file."""
    from postkit.builders.listing import ListingBuilder

    builder = ListingBuilder(
        ctx.obj["posts_dir"], include_drafts=include_drafts, logger=ctx.obj["logger"]
    )
    try:
        posts = builder.collect()
        written = builder.write(posts, Path(output))
    except ListingError as e:
        handle_cli_error(ctx, e, "build_listing", {"output": output})
        return

    click.echo(f"✅ Wrote {len(posts)} post(s) to {written}")
    click.echo(builder.stats.summary())

    if builder.stats.errors:
        raise click.ClickException(
            f"{builder.stats.errors} post(s) could not be loaded; see logs"
        )


if __name__ == "__main__":
    cli()
