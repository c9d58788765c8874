"""
validators
----------
Content checks for markdown posts.

Modules:
    - issues: Issue/report records and report formatting
    - frontmatter: YAML front matter structure and types
    - assets: Thumbnail and image references against the asset tree
    - md: Per-file orchestration, fence balance, links and content
    - cli: The ``validate`` command

Usage:
    from postkit.validators.md import MarkdownValidator

    validator = MarkdownValidator(posts_dir, assets_dir=assets_dir)
    report = validator.validate_all()
"""
