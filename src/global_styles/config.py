from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlobalStylesConfig:
    slug: str = "global-styles"
    db_path: str = "global-styles.db"
    output_dir: str = "uploads"
    base_url: str = ""
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def option_name(self) -> str:
        """Name of the stored option row, derived from the slug."""
        return self.slug.replace("-", "_")

    @property
    def css_dir(self) -> str:
        return f"{self.output_dir}/{self.slug}"
