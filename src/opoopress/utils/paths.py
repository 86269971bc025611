"""Slug and path safety utilities for content files."""

from __future__ import annotations

import os
from pathlib import Path

from pymdownx.slugs import slugify as _md_slugify

from opoopress.exceptions import PathTraversalError

# NFKD normalization transliterates Unicode to ASCII.
slugify_lower = _md_slugify(case="lower", separator="-", normalize="NFKD")


def slugify(text: str | None) -> str:
    """Convert text to a lowercase URL-friendly slug using Python Markdown semantics.

    Produces ASCII-only slugs with Unicode transliteration. Blank input yields
    an empty slug; callers decide whether that is acceptable.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify(None)
        ''

    """
    if text is None:
        return ""

    slug = slugify_lower(text, sep="-")

    # NFKD alone does not guarantee ASCII.
    return slug.encode("ascii", "ignore").decode("ascii").strip("-")


def safe_path_join(base_dir: Path, *parts: str) -> Path:
    r"""Safely join path parts and ensure result stays within base_dir.

    Containment is checked on the normalized path text, so symlinked
    directories inside ``base_dir`` are followed wherever they point.

    Raises:
        PathTraversalError: If an absolute part is given or ``..`` segments
            would climb out of ``base_dir``.

    Examples:
        >>> base = Path("/site")
        >>> safe_path_join(base, "source", "_posts", "2025-01-01-hello.markdown")
        PosixPath('/site/source/_posts/2025-01-01-hello.markdown')

    """
    if any(Path(part).is_absolute() for part in parts):
        absolute_part = next(part for part in parts if Path(part).is_absolute())
        msg = f"Absolute paths not allowed: {absolute_part}"
        raise PathTraversalError(msg)

    relative = os.path.normpath(os.path.join(*parts)) if parts else os.curdir
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        msg = f"Path traversal detected: joining {parts} to {base_dir} would escape base directory"
        raise PathTraversalError(msg)

    return base_dir / relative


__all__ = ["PathTraversalError", "safe_path_join", "slugify"]
