"""Third-party asset locations used by the page shell"""

from dataclasses import dataclass


MONACO_VERSION = "0.26.1"
HTMX_VERSION = "2.0.4"
TAILWIND_VERSION = "4.0.12"
FONTAWESOME_VERSION = "6.7.2"

MONACO_VS = f"https://cdnjs.cloudflare.com/ajax/libs/monaco-editor/{MONACO_VERSION}/min/vs"
HTMX_PACKAGE = f"https://unpkg.com/htmx.org@{HTMX_VERSION}"
TAILWIND_PACKAGE = f"https://unpkg.com/@tailwindcss/browser@{TAILWIND_VERSION}"
FONTAWESOME_PACKAGE = f"https://cdnjs.cloudflare.com/ajax/libs/font-awesome/{FONTAWESOME_VERSION}/css/all.min.css"


@dataclass(frozen=True)
class AssetConfig:
    """URLs of the editor widget, styling and icon font loaded by every page.

    The Monaco loader, editor script and stylesheet all live below
    ``monaco_vs``, which is also what the loader's ``require`` paths point at.
    """

    monaco_vs: str = MONACO_VS
    htmx: str = HTMX_PACKAGE
    tailwind: str = TAILWIND_PACKAGE
    fontawesome: str = FONTAWESOME_PACKAGE

    @property
    def monaco_loader(self) -> str:
        return f"{self.monaco_vs}/loader.js"

    @property
    def monaco_editor(self) -> str:
        return f"{self.monaco_vs}/editor/editor.main.js"

    @property
    def monaco_stylesheet(self) -> str:
        return f"{self.monaco_vs}/editor/editor.main.css"

    def items(self):
        """Every asset URL with a short label, in page load order"""
        return [
            ("Monaco loader", self.monaco_loader),
            ("Monaco editor", self.monaco_editor),
            ("htmx", self.htmx),
            ("Tailwind", self.tailwind),
            ("Font Awesome", self.fontawesome),
            ("Monaco stylesheet", self.monaco_stylesheet),
        ]
