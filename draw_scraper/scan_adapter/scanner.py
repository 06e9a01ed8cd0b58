from bs4 import BeautifulSoup


class Scanner:
    """Extracts marker fragments from static HTML, such as a saved page snapshot."""

    def extract_fragments(self, html: str, selector: str) -> list[str]:
        """Return the inner HTML of every element matching `selector`, in document order."""
        soup = BeautifulSoup(html, "html.parser")
        return [element.decode_contents() for element in soup.select(selector)]
