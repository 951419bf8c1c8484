"""Asset URL rewriting for event images.

Images uploaded through the legacy admin are stored as relative paths
(e.g. /uploads/2024/poster.jpg) and served from object storage.
"""


def rewrite_image_url(
    image_url: str | None,
    base_url: str,
    upload_prefix: str = "/uploads/",
) -> str | None:
    """Return an absolute asset URL for relative upload paths; pass others through.

    Args:
        image_url: Stored image value (relative path, absolute URL, or None).
        base_url: Public object-storage base URL.
        upload_prefix: Prefix that marks a relative upload path.

    Returns:
        Rewritten URL, the original value unchanged, or None when absent.
    """
    if not image_url or not image_url.startswith(upload_prefix):
        return image_url
    return f"{base_url.rstrip('/')}/{image_url[len(upload_prefix):]}"
