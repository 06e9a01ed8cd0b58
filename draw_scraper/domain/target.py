import re
from dataclasses import dataclass

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.-]")


@dataclass(frozen=True)
class DrawTarget:
    """A single draw results page: base URL, game slug and draw number.

    Values are not validated; a malformed part yields a malformed address
    which fails when the browser navigates to it.
    """
    base_url: str
    slug: str
    draw_no: str

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.slug}/{self.draw_no}"

    @property
    def snapshot_name(self) -> str:
        """Flat file name for the rendered page; path separators in the parts become '_'."""
        slug = _UNSAFE_FILENAME_CHARS.sub("_", self.slug)
        draw_no = _UNSAFE_FILENAME_CHARS.sub("_", self.draw_no)
        return f"{slug}-{draw_no}.html"
