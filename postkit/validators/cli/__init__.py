"""
Validators CLI Package
----------------------

Unified CLI for postkit validators.

Available validators:
    - md: Front matter, thumbnail assets, code fences, links and content

Usage:
    validate md frontmatter     # Validate YAML front matter
    validate md fences          # Check fenced code blocks are balanced
    validate md thumbnails      # Check thumbnail/image assets exist
    validate md links           # Check relative markdown links
    validate md all             # Run all markdown checks
"""
import click

from .markdown import md


@click.group()
def cli():
    """
    Post Validation Suite.

    Run content checks on markdown posts before the site generator
    builds them.
    """
    pass


cli.add_command(md)


if __name__ == "__main__":
    cli()
