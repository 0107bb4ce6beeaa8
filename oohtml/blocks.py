"""Named blocks of markup rendered from a template directory."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound, select_autoescape
from markupsafe import Markup

from .config import OohtmlConfig
from .errors import BlockNotFound, expect_string


class BlockLoader:
    """Render ``<blocks_dir>/<name><suffix>`` templates into embeddable markup.

    Blocks are Jinja templates, so they may use template logic and receive
    context values. Containers and elements passed as context render through
    their ``__html__`` method and are not escaped; plain strings are.
    """

    def __init__(self, blocks_dir: Path, suffix: str = ".html") -> None:
        self.blocks_dir = Path(blocks_dir)
        self.suffix = expect_string("suffix", suffix)
        self.env = Environment(
            loader=FileSystemLoader(str(self.blocks_dir)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    @classmethod
    def from_config(cls, config: OohtmlConfig) -> "BlockLoader":
        return cls(config.blocks_dir, suffix=config.block_suffix)

    def template_name(self, name: str) -> str:
        expect_string("block name", name)
        return f"{name}{self.suffix}"

    def load(self, name: str, **context: Any) -> Markup:
        """Render the named block and return it as safe markup."""
        template_name = self.template_name(name)
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as exc:
            if exc.name != template_name:
                raise
            raise BlockNotFound(f"No block {name!r} in {self.blocks_dir}") from exc
        return Markup(template.render(**context))

    def available(self) -> List[str]:
        if not self.blocks_dir.is_dir():
            return []
        names = []
        for path in sorted(self.blocks_dir.rglob(f"*{self.suffix}")):
            if path.is_file():
                relative = path.relative_to(self.blocks_dir).as_posix()
                names.append(relative[: -len(self.suffix)] if self.suffix else relative)
        return names


__all__ = ["BlockLoader"]
