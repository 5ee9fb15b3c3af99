from dataclasses import dataclass
from typing import Optional, Text


@dataclass(frozen=True)
class ParsedKey:
    prefix: Text
    name: Text
    extension: Text

    @property
    def format_name(self) -> Text:
        return self.extension[1:]

    def join(self) -> Text:
        return f"{self.prefix}{self.name}{self.extension}"


def split_key(key: Text) -> Optional[ParsedKey]:
    """Split an object key into path prefix, base name and extension.

    ``"album/cat.jpg"`` gives ``ParsedKey("album/", "cat", ".jpg")``. Returns
    ``None`` when the last path segment has no extension or no base name.
    """
    slash = key.rfind("/")
    prefix, file_name = key[: slash + 1], key[slash + 1 :]

    dot = file_name.rfind(".")
    # Need at least one character on each side of the dot
    if dot < 1 or dot == len(file_name) - 1:
        return None

    return ParsedKey(
        prefix=prefix,
        name=file_name[:dot],
        extension=file_name[dot:],
    )
