"""Path templating.

Routes declare variables as ``:var`` segments; Swagger paths must enclose
them in braces (http://swagger.io/specification/#pathTemplating).
"""


def convert_path(path: str | None) -> str | None:
    """Convert ``/users/:id`` into ``/users/{id}``.

    Empty segments are dropped; a path without any segment yields None.
    """
    template = None
    for segment in (path or "").split("/"):
        if not segment:
            continue
        if segment.startswith(":"):
            segment = "{" + segment[1:] + "}"
        template = f"{template or ''}/{segment}"
    return template


def path_parameters(path: str | None) -> list[str]:
    """Names of the ``:var`` segments of a raw route path, in order."""
    return [segment[1:] for segment in (path or "").split("/") if segment.startswith(":")]
